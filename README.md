# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no dependencies beyond the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.chars` | `CharType`, `char_type`, `case_flip`, `digit_to_int` |
| `dsakit.powers` | `power_overflow`, `power`, `power_sum` checked against 32-bit signed overflow |
| `dsakit.quadratic` | `SolutionType`, `solution_type`, `real_root_big`, `real_root_small` |
| `dsakit.fibonacci` | `iterative_fibonacci`, `recursive_fibonacci`, `bottom_up_fibonacci`, `top_down_fibonacci` |
| `dsakit.matrix` | `norm`, `dot_product`, `matrix_multiply_vector`, `matrix_multiply_matrix` |
| `dsakit.polynomial` | `horner`, `derivative`, `newton` (coefficients from the highest power down) |
| `dsakit.text` | `count_words`, `str_lower`, `str_trim` |
| `dsakit.wordstats` | `create_dictionary`, `contain_word`, `process_words`, `WordStats` |
| `dsakit.sorting` | in-place `select_sort`, `quick_sort`, `hybrid_sort`, each taking an optional `key` |
| `dsakit.records` | `Record`, `Stats`, letter `grade`, `import_data`, `process_data`, `report_data` |
| `dsakit.dllist` | `DoublyLinkedList` |
| `dsakit.bigint` | `BigInt` with addition, `bigint_fibonacci` |
| `dsakit.record_list` | `SortedRecordList`, records kept ordered by name |
| `dsakit.infix` | `Token`, `TokenType`, `infix_to_postfix`, `evaluate_postfix`, `evaluate_infix`, `format_tokens` |
| `dsakit.bst` | `BinarySearchTree` of records keyed by name |
| `dsakit.record_bst` | `RecordStore`, a search tree with running count, mean and standard deviation |
| `dsakit.tree` | `TreeNode`, `tree_property`, traversal generators, `bfs`, `dfs`, level-order `insert_tree` |
| `dsakit.avl` | `AVLTree`, `AVLNode`, `height`, `balance_factor`, `rotate_left`, `rotate_right` |
| `dsakit.record_avl` | `AVLRecordStore` with mergeable statistics, `avl_merge` |
| `dsakit.avl_set` | `AVLSet`, a set of strings backed by an AVL tree |
| `dsakit.heap` | `MinHeap`, `HeapItem`, `heap_sort` |
| `dsakit.hashtable` | `HashTable` with separate chaining, `Entry`, `hash_key` |
| `dsakit.symbolic` | expressions with named variables and assignment statements |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Evaluate an infix expression (integer arithmetic, division truncates toward zero):

```python
from dsakit.infix import evaluate_infix, format_tokens, infix_to_postfix

evaluate_infix("10 * (2 + 3) - 4")                 # 46
format_tokens(infix_to_postfix("10 * (2 + 3) - 4"))  # "10 2 3 + * 4 -"
```

Keep variables in a hash table and evaluate statements against them:

```python
from dsakit.hashtable import HashTable
from dsakit.symbolic import evaluate_statement

table = HashTable(10)
evaluate_statement(table, "a = 3")
evaluate_statement(table, "b = (a + 3) * 2")
table.search("b").value              # 12
```

Unknown symbols evaluate to 0; `evaluate_statement` returns `None` for a
bare symbol that is not in the table.

Big integers built from digit strings:

```python
from dsakit.bigint import BigInt, bigint_fibonacci

str(BigInt("999") + BigInt("1"))     # "1000"
str(bigint_fibonacci(100))           # "354224848179261915075"
```

A self-balancing tree of records:

```python
from dsakit.avl import AVLTree
from dsakit.records import Record

tree = AVLTree()
for name, score in [("Ada", 91.0), ("Bob", 74.5), ("Cy", 66.0)]:
    tree.insert(Record(name, score))
tree.search("Bob").score             # 74.5
[r.name for r in tree]               # ["Ada", "Bob", "Cy"]
```

A min-heap, and heap sort into decreasing key order:

```python
from dsakit.heap import HeapItem, MinHeap, heap_sort

heap = MinHeap(4)
heap.insert(HeapItem(5, 1))
heap.insert(HeapItem(2, 2))
heap.extract_min().key               # 2

items = [HeapItem(1, 0), HeapItem(3, 0), HeapItem(2, 0)]
heap_sort(items)
[item.key for item in items]         # [3, 2, 1]
```

Score records read from a text stream and reported with letter grades:

```python
import io
import sys

from dsakit.records import import_data, process_data, report_data

records = import_data(io.StringIO("Ada,91\nBob,74.5\nCy,66\n"))
stats = process_data(records)        # count, mean, stddev, median
report_data(sys.stdout, records, stats)
```

## Errors

Where a result cannot be produced, functions raise rather than return a
sentinel: `power` and `power_sum` raise `OverflowError` when the power does
not fit a 32-bit signed integer; `real_root_big` and `real_root_small` raise
`ValueError` when there is no real root; `digit_to_int` raises `ValueError`
for a non-digit; `BigInt` raises `ValueError` for a non-digit character;
`MinHeap.find_min` and `MinHeap.extract_min` raise `IndexError` on an empty
heap; `HashTable.delete`, `SortedRecordList.delete` and
`AVLRecordStore.remove_record` raise `KeyError` for a missing name.

## What it does not do

dsakit is a library only. It has no command-line program, and nothing is
stored between runs: the record and word-statistics functions read from and
write to file objects that the caller opens.