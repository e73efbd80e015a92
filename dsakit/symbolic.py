"""Integer infix expressions with named symbols, and assignment statements."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from dsakit.hashtable import Entry, HashTable
from dsakit.infix import Token, TokenType, priority


def _is_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def infix_to_postfix_symbol(table: HashTable, infixstr: str) -> list[Token]:
    """Convert an infix expression with symbols to tokens in postfix order.

    A symbol is replaced by its value in ``table``, or 0 if it is not there.
    Whitespace is skipped; any character that is not a letter, digit or
    parenthesis is treated as an operator.
    """
    output: list[Token] = []
    stack: list[Token] = []
    i = 0
    n = len(infixstr)
    while i < n:
        c = infixstr[i]
        if c.isspace():
            i += 1
        elif _is_alpha(c):
            start = i
            while i < n and _is_alpha(infixstr[i]):
                i += 1
            entry = table.search(infixstr[start:i])
            output.append(Token(entry.value if entry else 0, TokenType.OPERAND))
        elif _is_digit(c):
            start = i
            while i < n and _is_digit(infixstr[i]):
                i += 1
            output.append(Token(int(infixstr[start:i]), TokenType.OPERAND))
        elif c == "(":
            stack.append(Token(ord("("), TokenType.LEFT_PAREN))
            i += 1
        elif c == ")":
            while stack and stack[-1].kind is not TokenType.LEFT_PAREN:
                output.append(stack.pop())
            if stack:
                stack.pop()
            i += 1
        else:
            while (
                stack
                and stack[-1].kind is TokenType.OPERATOR
                and priority(chr(stack[-1].value)) >= priority(c)
            ):
                output.append(stack.pop())
            stack.append(Token(ord(c), TokenType.OPERATOR))
            i += 1
    output.extend(reversed(stack))
    return output


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def evaluate_postfix(postfix: Iterable[Token]) -> int:
    """Evaluate tokens in postfix order.

    ``+ - * /`` act as usual, division truncating toward zero. Any other
    operator drops its right operand and keeps the left. Parenthesis tokens
    are ignored. Raises ValueError if an operator lacks operands or there is
    no result, ZeroDivisionError on division by zero.
    """
    stack: list[int] = []
    for token in postfix:
        if token.kind is TokenType.OPERAND:
            stack.append(token.value)
        elif token.kind is TokenType.OPERATOR:
            if len(stack) < 2:
                raise ValueError(f"missing operand for {chr(token.value)!r}")
            right = stack.pop()
            left = stack[-1]
            op = chr(token.value)
            if op == "+":
                stack[-1] = left + right
            elif op == "-":
                stack[-1] = left - right
            elif op == "*":
                stack[-1] = left * right
            elif op == "/":
                stack[-1] = _trunc_div(left, right)
    if not stack:
        raise ValueError("expression has no value")
    return stack[-1]


def evaluate_infix_symbol(table: HashTable, infixstr: str) -> int:
    """Evaluate an infix expression whose symbols take their values from ``table``.

    An empty expression has the value 0.
    """
    if not infixstr:
        return 0
    return evaluate_postfix(infix_to_postfix_symbol(table, infixstr))


def evaluate_statement(table: HashTable, statement: str) -> Optional[Entry]:
    """Run a statement such as ``b = (a+3)*2`` or look up a bare symbol ``b``.

    An assignment stores the value in ``table`` and returns the name and
    value. A bare symbol returns its current entry. Returns None when the
    left side does not start with a letter or the symbol is unknown.
    """
    line = statement.replace(" ", "")
    name, eq, expression = line.partition("=")
    if not name or not _is_alpha(name[0]):
        return None
    if eq:
        value = evaluate_infix_symbol(table, expression)
        table.insert(name, value)
        return Entry(name, value)
    entry = table.search(name)
    if entry is None:
        return None
    return Entry(name, entry.value)