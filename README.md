# flagvalues

Typed values for command-line flags. Each value class keeps its current
value in a `value` attribute, parses text handed to it from the command
line with `set`, reports its type name with `type_name()`, and renders
itself with `str()`. Every class also has a `convert` class method that
turns the rendered form back into a Python value.

The list-valued classes additionally offer `append(text)`,
`replace(values)` and `get_slice()` (the items rendered as strings).

## Installation

```
pip install flagvalues
```

## Value types

| Module                  | Contents                                                          |
|-------------------------|-------------------------------------------------------------------|
| `flagvalues.strings`    | `StringValue`, `StringArrayValue`, `StringSliceValue`, `read_as_csv`, `write_as_csv` |
| `flagvalues.integers`   | `Int8Value`, `Int32Value`, `Int64Value`, `UintValue`, `Uint8Value`, `IntegerValue`, `parse_int`, `parse_uint`, `NumError` |
| `flagvalues.int_slices` | `IntSliceValue`, `IntegerSliceValue`                              |
| `flagvalues.addresses`  | `IPValue`, `parse_ip`                                             |
| `flagvalues.ip_slices`  | `IPSliceValue`                                                    |
| `flagvalues.networks`   | `IPMaskValue`, `IPNetValue`, `parse_ipv4_mask`                    |

Type names reported by `type_name()`: `string`, `stringArray`,
`stringSlice`, `int8`, `int32`, `int64`, `uint`, `uint8`, `intSlice`,
`ip`, `ipSlice`, `ipMask`, `ipNet`.

## Examples

Integer lists split on commas. The first `set` replaces the default, and
each later call appends to it:

```python
from flagvalues.int_slices import IntSliceValue

value = IntSliceValue([0, 1])
value.set("1,2")
value.set("3")
print(value.value)                       # [1, 2, 3]
print(str(value))                        # [1,2,3]
print(IntSliceValue.convert("[4,5]"))    # [4, 5]
```

String slices read their text as one CSV record, so quoted items may hold
commas. String arrays keep each piece of text whole:

```python
from flagvalues.strings import StringArrayValue, StringSliceValue

ss = StringSliceValue([])
ss.set('"one,two",three')
print(ss.value)      # ['one,two', 'three']

sa = StringArrayValue([])
sa.set("one,two")
print(sa.value)      # ['one,two']
```

Integer values are range-checked against the width in their names and
take `0x`, `0o`, `0b` and bare leading-`0` (octal) prefixes. A failed
`set` raises `NumError`; for an out-of-range number the value is left at
the nearest bound:

```python
from flagvalues.integers import Int8Value, NumError, parse_int

v = Int8Value(0)
v.set("0x7f")
print(v.value)       # 127
try:
    v.set("128")
except NumError as err:
    print(err)       # parse_int: parsing '128': value out of range

print(parse_int("-0b101"))   # -5
```

Addresses, address lists and networks:

```python
from flagvalues.addresses import IPValue
from flagvalues.ip_slices import IPSliceValue
from flagvalues.networks import IPMaskValue, IPNetValue, parse_ipv4_mask

ip = IPValue(None)
ip.set(" 127.0.0.1 ")
print(ip)            # 127.0.0.1

ips = IPSliceValue([])
ips.set("10.0.0.1, fe80::1")
print(ips)           # [10.0.0.1,fe80::1]

net = IPNetValue(None)
net.set("1.2.3.4/8")
print(net)           # 1.0.0.0/8

print(parse_ipv4_mask("ffffff00"))   # b'\xff\xff\xff\x00'
mask = IPMaskValue("255.255.255.0")
print(mask)          # ffffff00
```

Text that cannot be parsed raises `ValueError` (or its subclass
`NumError` for integers).

## What this package does not do

- It holds and parses single flag values only. There is no flag set, no
  registry of named flags, no parsing of a whole argument list, no
  shorthand letters and no usage or help output.
- Of the unsigned integers only `uint` and `uint8` are provided; there
  are no 16-, 32- or 64-bit unsigned value classes.
- Of the integer lists only `IntSliceValue` is provided; there are no
  ready-made 32-bit, 64-bit or unsigned list classes, though
  `IntegerSliceValue` can be subclassed with the `type_name`, `bits`,
  `signed` and `base` class keywords to declare one.
- There are no map-valued flags (`key=value` pairs).

## Running the tests

```
pip install -e .[test]
pytest
```