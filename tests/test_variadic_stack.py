import pytest

from hopstep.variadic_stack import DEFAULT_STACK_SIZE, VariadicStack


def test_new_stack_is_zeroed():
    stack = VariadicStack()
    assert stack.size == DEFAULT_STACK_SIZE
    assert stack.data == bytes(DEFAULT_STACK_SIZE)
    assert stack.top_offset == 0
    assert stack.count == 0


def test_push_pop_round_trip():
    stack = VariadicStack(16)
    stack.push(b"abc")
    assert stack.top_offset == 3
    assert stack.count == 1
    assert stack.pop(3) == b"abc"
    assert stack.top_offset == 0
    assert stack.count == 0


def test_lifo_order():
    stack = VariadicStack(32)
    stack.push(b"first")
    stack.push(b"xy")
    assert stack.pop(2) == b"xy"
    assert stack.pop(5) == b"first"


def test_overflow():
    stack = VariadicStack(4)
    stack.push(b"abcd")
    with pytest.raises(OverflowError):
        stack.push(b"e")


def test_underflow():
    stack = VariadicStack(8)
    stack.push(b"ab")
    with pytest.raises(IndexError):
        stack.pop(3)


def test_typed_values():
    stack = VariadicStack(64)
    stack.push_value("<i", -7)
    stack.push_value("<d", 2.5)
    stack.push_value("<h", 300)
    assert stack.pop_value("<h") == 300
    assert stack.pop_value("<d") == 2.5
    assert stack.pop_value("<i") == -7


def test_call_frame_argument_order():
    stack = VariadicStack(256)
    stack.push_value("<i", 1)
    stack.push_value("<i", 2)
    assert [stack.pop_value("<i"), stack.pop_value("<i")] == [2, 1]


def test_reference_round_trip():
    stack = VariadicStack(64)
    payload = {"key": [1, 2]}
    stack.push_reference(payload)
    stack.push_reference(payload)
    assert stack.pop_reference() is payload
    assert stack.pop_reference() is payload
    assert stack.top_offset == 0


def test_reference_needs_room():
    stack = VariadicStack(4)
    with pytest.raises(OverflowError):
        stack.push_reference(object())


def test_pop_reference_on_plain_bytes():
    stack = VariadicStack(16)
    stack.push(bytes(8))
    with pytest.raises(LookupError):
        stack.pop_reference()


def test_invalid_size():
    with pytest.raises(ValueError):
        VariadicStack(0)