import pytest

from flagvalues.strings import (
    StringArrayValue,
    StringSliceValue,
    StringValue,
    read_as_csv,
    write_as_csv,
)


def _parse(flag, args):
    for arg in args:
        flag.set(arg)
    return flag


def _get(flag):
    return type(flag).convert(str(flag))


# ---- CSV helpers ----------------------------------------------------------


def test_read_as_csv_empty():
    assert read_as_csv("") == []


def test_read_as_csv_plain_fields():
    assert read_as_csv("a,b,,c") == ["a", "b", "", "c"]


def test_read_as_csv_trailing_comma():
    assert read_as_csv("a,") == ["a", ""]


def test_read_as_csv_quoted_fields():
    assert read_as_csv('a,"b""c",d') == ["a", 'b"c', "d"]
    assert read_as_csv('"one,two",three') == ["one,two", "three"]


def test_read_as_csv_only_first_record():
    assert read_as_csv("a,b\nc,d") == ["a", "b"]


def test_read_as_csv_skips_leading_blank_lines():
    assert read_as_csv("\n\r\nx,y") == ["x", "y"]


def test_read_as_csv_multiline_quoted_field():
    assert read_as_csv('"a\r\nb",c') == ["a\nb", "c"]


def test_read_as_csv_keeps_spaces():
    assert read_as_csv(" a , b") == [" a ", " b"]


@pytest.mark.parametrize("text", ['a"b', '"ab', '"a"b', "\n"])
def test_read_as_csv_errors(text):
    with pytest.raises(ValueError):
        read_as_csv(text)


def test_write_as_csv_quoting():
    assert write_as_csv(["a", "b,c", 'd"e', " f", "g h", ""]) == (
        'a,"b,c","d""e"," f",g h,'
    )


def test_write_as_csv_special_cases():
    assert write_as_csv([]) == ""
    assert write_as_csv([""]) == ""
    assert write_as_csv(["\\."]) == '"\\."'
    assert write_as_csv(["x\ny"]) == '"x\ny"'


@pytest.mark.parametrize(
    "values",
    [["one", "two"], ["a,b", '"q"', " lead"], ["[a-z]", "][]-["], ["multi\nline", "x"]],
)
def test_csv_round_trip(values):
    assert read_as_csv(write_as_csv(values)) == values


# ---- StringValue ------------------------------------------------------------


def test_string_value_set_and_str():
    flag = StringValue("default")
    assert str(flag) == "default"
    flag.set("other")
    assert flag.value == "other"
    assert str(flag) == "other"
    assert flag.type_name() == "string"
    assert StringValue.convert(str(flag)) == "other"


# ---- StringArrayValue -----------------------------------------------------


def test_empty_sa():
    flag = _parse(StringArrayValue([]), [])
    assert _get(flag) == []


def test_empty_sa_value():
    flag = _parse(StringArrayValue([]), [""])
    assert _get(flag) == []


def test_sa_default():
    flag = _parse(StringArrayValue(["default", "values"]), [])
    assert flag.value == ["default", "values"]
    assert _get(flag) == ["default", "values"]


def test_sa_with_default():
    flag = _parse(StringArrayValue(["default", "values"]), ["one"])
    assert flag.value == ["one"]
    assert _get(flag) == ["one"]


def test_sa_called_twice():
    flag = _parse(StringArrayValue([]), ["one", "two"])
    assert flag.value == ["one", "two"]
    assert _get(flag) == ["one", "two"]


def test_sa_with_special_char():
    values = ["one,two", '"three"', '"four,five",six', "seven eight"]
    flag = _parse(StringArrayValue([]), values)
    assert flag.value == values
    assert _get(flag) == values


def test_sa_as_slice_value():
    flag = _parse(StringArrayValue([]), ["1ns", "2ns"])
    flag.replace(["3ns"])
    assert flag.value == ["3ns"]


def test_sa_with_square_brackets():
    values = ["][]-[", "[a-z]", "[a-z]+"]
    flag = _parse(StringArrayValue([]), values)
    assert flag.value == values
    assert _get(flag) == values


def test_sa_append_and_get_slice():
    flag = StringArrayValue(["a"])
    flag.append("b,c")
    assert flag.get_slice() == ["a", "b,c"]
    assert str(flag) == '[a,"b,c"]'
    assert flag.type_name() == "stringArray"


def test_sa_convert_rejects_unbracketed_short_text():
    with pytest.raises(ValueError):
        StringArrayValue.convert("x")


# ---- StringSliceValue -----------------------------------------------------


def test_empty_ss():
    flag = _parse(StringSliceValue([]), [])
    assert _get(flag) == []


def test_empty_ss_value():
    flag = _parse(StringSliceValue([]), [""])
    assert flag.value == []
    assert _get(flag) == []


def test_ss():
    vals = ["one", "two", "4", "3"]
    flag = _parse(StringSliceValue([]), [",".join(vals)])
    assert flag.value == vals
    assert _get(flag) == vals


def test_ss_default():
    flag = _parse(StringSliceValue(["default", "values"]), [])
    assert flag.value == ["default", "values"]
    assert _get(flag) == ["default", "values"]


def test_ss_with_default():
    vals = ["one", "two", "4", "3"]
    flag = _parse(StringSliceValue(["default", "values"]), [",".join(vals)])
    assert flag.value == vals
    assert _get(flag) == vals


def test_ss_called_twice():
    flag = _parse(StringSliceValue([]), ["one,two", "three"])
    assert flag.value == ["one", "two", "three"]
    assert _get(flag) == ["one", "two", "three"]


def test_ss_with_comma():
    flag = _parse(StringSliceValue([]), ['"one,two"', '"three"', '"four,five",six'])
    expected = ["one,two", "three", "four,five", "six"]
    assert flag.value == expected
    assert _get(flag) == expected


def test_ss_with_square_brackets():
    flag = _parse(StringSliceValue([]), ['"[a-z]"', '"[a-z]+"'])
    assert flag.value == ["[a-z]", "[a-z]+"]
    assert _get(flag) == ["[a-z]", "[a-z]+"]


def test_ss_as_slice_value():
    flag = _parse(StringSliceValue([]), ["one", "two"])
    flag.replace(["three"])
    assert flag.value == ["three"]


def test_ss_bad_quoting_raises():
    flag = StringSliceValue([])
    with pytest.raises(ValueError):
        flag.set('a"b')


def test_ss_append_str_and_type():
    flag = StringSliceValue(["x"])
    flag.append("y z")
    assert flag.get_slice() == ["x", "y z"]
    assert str(flag) == "[x,y z]"
    assert flag.type_name() == "stringSlice"