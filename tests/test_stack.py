import pytest

from pvrkit.stack import Stack, StackFullError


def test_push_returns_new_top():
    stack = Stack(8)
    assert stack.push("a") == "a"
    assert stack.push("b") == "b"
    assert stack.top() == "b"
    assert len(stack) == 2


def test_pop_reveals_previous():
    stack = Stack(8)
    stack.push(1)
    stack.push(2)
    stack.pop()
    assert stack.top() == 1
    assert len(stack) == 1


def test_holds_one_less_than_capacity():
    stack = Stack(3)
    stack.push("x")
    stack.push("y")
    with pytest.raises(StackFullError):
        stack.push("z")
    assert len(stack) == 2
    assert stack.top() == "y"


def test_full_error_is_overflow():
    stack = Stack(1)
    with pytest.raises(OverflowError):
        stack.push(0)


def test_pop_on_empty_is_noop():
    stack = Stack(4)
    stack.pop()
    assert len(stack) == 0
    stack.push("only")
    stack.pop()
    stack.pop()
    assert len(stack) == 0


def test_replace_changes_top_only():
    stack = Stack(4)
    stack.push("bottom")
    stack.push("old")
    assert stack.replace("new") == "new"
    assert stack.top() == "new"
    stack.pop()
    assert stack.top() == "bottom"


def test_empty_top_and_replace_raise():
    stack = Stack(4)
    with pytest.raises(IndexError):
        stack.top()
    with pytest.raises(IndexError):
        stack.replace("x")


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-1)