# hessiankit

Pieces of the Hessian 2 binary serialization protocol, as used by Java RPC
frameworks, together with Python counterparts of the Java value and
exception types that travel over it.

## What is inside

- `hessiankit.longs` – encoding and decoding of 64-bit longs.
  `encode_long(value)` picks the most compact form (one byte, two bytes,
  three bytes, a 32-bit int cast to long, or the full eight-byte form) and
  raises `OverflowError` for values outside the 64-bit range.
  `read_long(stream, tag=None)` reads one long from a binary stream, also
  accepting null and false (0), true (1), and int and double encodings.
  `decode_long(data)` decodes the long at the start of a byte string.
  Malformed or truncated input raises `HessianDecodeError`, a `ValueError`.
- `hessiankit.null` – the null marker: `encode_null()` and `is_null(data)`.
- `hessiankit.list_types` – list tags and list type names:
  - tag tests `typed_list_tag`, `untyped_list_tag`,
    `list_fixed_typed_len_tag`, `list_fixed_untyped_len_tag`, and
    `fixed_list_length(tag)`, which returns the length carried by a compact
    list tag, `None` for other list tags, and raises `HessianDecodeError`
    for tags that do not start a list;
  - `get_list_type_name(type_name, depth=0)`, giving the Java array type
    name for lists of an element type (for example `"int32"` gives
    `"[int"`), or `None` if the element type is unknown;
  - `get_list_type(java_list_name)`, giving a `ListType` for a name such as
    `"[int"` or `"[[string"`, or `None` if unknown. A `ListType` has
    `depth`, `leaf`, `zero_value()` and `new(length)`;
  - `register_type_name` and `register_list_element_type` to extend both
    mappings.
- `hessiankit.sql_time` – `SqlDate` and `SqlTime`, counterparts of
  `java.sql.Date` and `java.sql.Time`, each wrapping a `datetime`.
  `SqlDate.value_of("YYYY-MM-DD")` and `SqlTime.value_of("HH:MM:SS")` parse
  strings (raising `ValueError` on bad input); `sql_time_class_names()` lists
  their Java class names.
- `hessiankit.java_util` – `UUID`, `Locale`, `LocaleHandle` and `LocaleEnum`,
  with `to_locale(e)` returning a predefined locale and
  `get_locale_from_handler(handle)` looking one up by its string form (an
  unknown name gives an empty locale).
- `hessiankit.throwable` – `JavaThrowable`, the base of all exception types
  here, with `detail_message`, `cause`, `stack_trace`,
  `suppressed_exceptions` and `get_stack_trace()`; `StackTraceElement`; and
  `UnknownException` for Java exception classes without a Python type.
  Every subclass that sets `java_class_name` is registered under it, and
  `get_exception_class(java_name)` looks it up.
  `check_and_get_exception(java_name, field_names)` treats a class as a
  throwable when its fields include `detailMessage`, `suppressedExceptions`,
  `stackTrace` and `cause`, and returns its registered class, creating an
  `UnknownException` subclass for it if needed.
- `hessiankit.io_exceptions` – `StreamCorruptedException`,
  `SyncFailedException`, `UncheckedIOException` (which raises `ValueError`
  when given no cause), `UTFDataFormatException`, `WriteAbortedException`
  and `ZipException`.
- `hessiankit.lang_exceptions` – `StringIndexOutOfBoundsException`,
  `TimeoutException`, `TooManyListenersException`,
  `TypeNotPresentException`, `UndeclaredThrowableException`,
  `UnknownFormatConversionException`, `UnknownFormatFlagsException`,
  `UnmodifiableClassException`, `UnsupportedOperationException` and
  `WrongMethodTypeException`.
- `hessiankit.time_exceptions` – `UnsupportedTemporalTypeException` and
  `ZoneRulesException`.

## What it does not do

There is no general encoder or decoder here: the package does not
serialize or deserialize whole Hessian streams, objects, maps, strings,
dates or list contents, and it keeps no class-definition or reference
tables. It provides the long and null encodings, list tag and list type
handling, and the Java value and exception types that a full codec would
build on.

## Installation

```
pip install hessiankit
```

## Examples

Longs:

```python
from hessiankit.longs import encode_long, decode_long

data = encode_long(0x7FF)
assert decode_long(data) == 0x7FF
```

Null:

```python
from hessiankit.null import encode_null, is_null

assert is_null(encode_null())
```

List type names:

```python
from hessiankit.list_types import get_list_type, get_list_type_name

assert get_list_type_name("int32") == "[int"
assert get_list_type("[[int").depth == 2
```

Locales:

```python
from hessiankit.java_util import LocaleEnum, LocaleHandle, to_locale, get_locale_from_handler

us = to_locale(LocaleEnum.US)
assert str(us) == "en_US"
assert get_locale_from_handler(LocaleHandle("en_US")) == us
```

SQL dates and times:

```python
from hessiankit.sql_time import SqlDate, SqlTime

d = SqlDate.value_of("2020-08-09")
assert (d.year(), d.month(), d.day()) == (2020, 8, 9)

t = SqlTime.value_of("13:15:46")
assert (t.hour(), t.minute(), t.second()) == (13, 15, 46)
```

Unknown exceptions:

```python
from hessiankit.throwable import check_and_get_exception

cls, is_throwable = check_and_get_exception(
    "com.example.UserDefinedException",
    ["detailMessage", "code", "suppressedExceptions", "stackTrace", "cause"],
)
assert is_throwable
assert str(cls("boom")) == "throw com.example.UserDefinedException : boom"
```

## Running the tests

```
pip install -e ".[test]"
pytest
```