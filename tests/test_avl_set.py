from dsakit.avl_set import AVLSet


def test_add_and_contains():
    s = AVLSet()
    for word in ("pear", "apple", "fig"):
        s.add(word)
    assert len(s) == 3
    assert "apple" in s
    assert "grape" not in s
    assert list(s) == ["apple", "fig", "pear"]


def test_duplicates_are_not_counted():
    s = AVLSet(["a", "b", "a", "b", "c"])
    assert len(s) == 3
    assert list(s) == ["a", "b", "c"]


def test_remove():
    s = AVLSet(["x", "y", "z"])
    s.remove("y")
    assert "y" not in s
    assert len(s) == 2


def test_remove_missing_is_ignored():
    s = AVLSet(["x", "y"])
    s.remove("nothing")
    assert list(s) == ["x", "y"]


def test_non_string_not_contained():
    s = AVLSet(["1"])
    assert 1 not in s
    assert "1" in s


def test_clear():
    s = AVLSet(["one", "two", "three"])
    s.clear()
    assert len(s) == 0
    assert "one" not in s


def test_many_elements_match_builtin_set():
    words = [f"w{i % 37}" for i in range(200)]
    s = AVLSet(words)
    assert len(s) == len(set(words))
    assert list(s) == sorted(set(words))