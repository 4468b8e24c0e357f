import pytest

from flagvalues.int_slices import IntegerSliceValue, IntSliceValue
from flagvalues.integers import NumError


def test_empty():
    value = IntSliceValue([])
    assert IntSliceValue.convert(str(value)) == []


def test_set_values():
    value = IntSliceValue([])
    value.set("1,2,4,3")
    assert value.value == [1, 2, 4, 3]
    assert IntSliceValue.convert(str(value)) == [1, 2, 4, 3]


def test_default():
    value = IntSliceValue([0, 1])
    assert value.value == [0, 1]
    assert IntSliceValue.convert(str(value)) == [0, 1]


def test_set_replaces_default():
    value = IntSliceValue([0, 1])
    value.set("1,2")
    assert value.value == [1, 2]
    assert IntSliceValue.convert(str(value)) == [1, 2]


def test_called_twice():
    value = IntSliceValue([])
    value.set("1,2")
    value.set("3")
    assert value.value == [1, 2, 3]


def test_replace_as_slice_value():
    value = IntSliceValue([])
    value.set("1")
    value.set("2")
    value.replace(["3"])
    assert value.value == [3]


def test_append_and_get_slice():
    value = IntSliceValue([1])
    value.append("2")
    assert value.get_slice() == ["1", "2"]


def test_string_form():
    assert str(IntSliceValue([0, 1])) == "[0,1]"
    assert IntSliceValue().type_name() == "intSlice"


@pytest.mark.parametrize("bad", ["", "a", "1,x", "0x10", "1_000"])
def test_set_rejects_non_decimal(bad):
    value = IntSliceValue([5])
    with pytest.raises(NumError):
        value.set(bad)
    assert value.value == [5]


def test_replace_error_keeps_value():
    value = IntSliceValue([1, 2])
    with pytest.raises(NumError):
        value.replace(["3", "z"])
    assert value.value == [1, 2]


def test_convert_trims_brackets_and_negative():
    assert IntSliceValue.convert("[-1,2]") == [-1, 2]


def test_base_class_requires_kind():
    with pytest.raises(TypeError):
        IntegerSliceValue()