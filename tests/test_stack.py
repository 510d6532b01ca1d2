import pytest

from practicekit.stack import ConsumingStack, FuncStack


def first(text):
    return text


def second(text):
    return text


def third(text):
    return text


def test_func_stack_pops_in_reverse():
    stack = FuncStack()
    for func in (first, second, third):
        stack.push(func)
    assert stack.pop() is third
    assert stack.pop() is second
    assert len(stack) == 1


def test_func_stack_base_cannot_be_popped():
    stack = FuncStack()
    with pytest.raises(IndexError):
        stack.pop()
    stack.push(first)
    with pytest.raises(IndexError):
        stack.pop()


def test_func_stack_rejects_non_callable():
    with pytest.raises(TypeError):
        FuncStack().push("not a function")


def test_func_stack_listing_names_neighbours():
    stack = FuncStack()
    stack.push(first)
    stack.push(second)
    lines = stack.listing().split(" \n")
    assert len(lines) == 2
    assert lines[0] == "Prev: <nil>, Actual: first, Next: second"
    assert lines[1] == "Prev: first, Actual: second, Next: <nil>"


def test_empty_func_stack_listing():
    assert FuncStack().listing() == "Prev: <nil>, Actual: <nil>, Next: <nil>"


def test_consuming_stack_cycles():
    stack = ConsumingStack()
    for item in ("1", "2", "3"):
        stack.push(item)
    assert [stack.pop() for _ in range(4)] == ["3", "2", "1", "3"]


def test_consuming_stack_empty_pop():
    assert ConsumingStack().pop() is None


def test_consuming_stack_single_item_repeats():
    stack = ConsumingStack()
    stack.push("only")
    assert stack.pop() == "only"
    assert stack.pop() == "only"


def test_consuming_stack_listing_shrinks_as_items_are_consumed():
    stack = ConsumingStack()
    for item in ("1", "2", "3"):
        stack.push(item)
    assert len(stack.listing().split(" \n")) == 3
    stack.pop()
    listing = stack.listing()
    assert len(listing.split(" \n")) == 2
    assert listing.endswith("Next: 3 true")


def test_consuming_stack_listing_format():
    stack = ConsumingStack()
    stack.push("1")
    stack.push("2")
    assert stack.listing() == (
        "Prev: <nil>, Actual: 1, Next: 2 false \nPrev: 1 false, Actual: 2, Next: <nil>"
    )