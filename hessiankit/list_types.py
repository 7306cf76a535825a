"""List tags and the mapping between element types and Java list type names."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Union

from hessiankit.java_util import UUID, LocaleHandle
from hessiankit.longs import HessianDecodeError
from hessiankit.sql_time import SqlDate, SqlTime
from hessiankit.throwable import JavaThrowable, StackTraceElement, get_exception_class

BC_LIST_VARIABLE = 0x55
BC_LIST_FIXED = 0x56
BC_LIST_VARIABLE_UNTYPED = 0x57
BC_LIST_FIXED_UNTYPED = 0x58

LIST_FIXED_TYPED_LEN_MIN, LIST_FIXED_TYPED_LEN_MAX = 0x70, 0x77
LIST_FIXED_UNTYPED_LEN_MIN, LIST_FIXED_UNTYPED_LEN_MAX = 0x78, 0x7F

_lock = threading.Lock()

_type_names: dict[str, str] = {
    "string": "[string",
    "str": "[string",
    "int8": "[short",
    "int16": "[short",
    "uint16": "[short",
    "int32": "[int",
    "uint32": "[int",
    "int": "[long",
    "uint": "[long",
    "int64": "[long",
    "uint64": "[long",
    "float32": "[float",
    "float64": "[double",
    "float": "[double",
    "bool": "[boolean",
    "time.Time": "[date",
    "datetime": "[date",
    "JavaThrowable": "[java.lang.Throwable",
    "object": "[object",
    "Object": "[object",
}

_element_types: dict[str, type] = {
    "string": str,
    "java.lang.String": str,
    "char": str,
    "short": int,
    "int": int,
    "long": int,
    "float": float,
    "double": float,
    "boolean": bool,
    "java.util.Date": datetime,
    "date": datetime,
    "object": object,
    "java.lang.Object": object,
    "java.lang.StackTraceElement": StackTraceElement,
    "java.lang.Throwable": JavaThrowable,
}

_registered_types: dict[str, type] = {
    cls.java_class_name: cls for cls in (SqlDate, SqlTime, UUID, LocaleHandle)
}

_ZERO_VALUES: dict[type, Any] = {int: 0, float: 0.0, str: "", bool: False}


@dataclass(frozen=True)
class ListType:
    """The type of a decoded typed list: its element type, possibly another list."""

    element: Union[type, "ListType"]

    @property
    def depth(self) -> int:
        """How many list levels this type nests."""
        if isinstance(self.element, ListType):
            return self.element.depth + 1
        return 1

    @property
    def leaf(self) -> type:
        """The element type found below all list levels."""
        if isinstance(self.element, ListType):
            return self.element.leaf
        return self.element

    def zero_value(self) -> Any:
        """The value an element takes when none, or null, is decoded for it."""
        if isinstance(self.element, ListType):
            return None
        return _ZERO_VALUES.get(self.element)

    def new(self, length: int) -> list[Any]:
        """Create a list of ``length`` elements, each the zero value."""
        if length < 0:
            raise ValueError(f"negative list length {length}")
        return [self.zero_value()] * length

    def __str__(self) -> str:
        return "[]" * self.depth + getattr(self.leaf, "__name__", str(self.leaf))


def _type_key(type_name: str | type) -> str:
    name = type_name if isinstance(type_name, str) else type_name.__name__
    return name.removeprefix("*")


def register_type_name(type_name: str | type, java_type: str) -> None:
    """Map an element type to the Java type written in a typed list header."""
    with _lock:
        _type_names[_type_key(type_name)] = "[" + java_type


def register_list_element_type(java_name: str, element_type: type) -> None:
    """Map a Java class name to the Python type used for its list elements."""
    with _lock:
        _registered_types[java_name] = element_type


def get_list_type_name(type_name: str | type, depth: int = 0) -> str | None:
    """Return the Java list type name for lists of ``type_name``.

    ``depth`` is how many list levels the element itself has, so a list of
    lists of ``int32`` is named by ``get_list_type_name("int32", 1)``.
    Returns ``None`` for an element type with no known Java name.
    """
    if depth < 0:
        raise ValueError(f"negative depth {depth}")
    mapped = _type_names.get(_type_key(type_name))
    if mapped is None:
        return None
    return "[" * depth + mapped


def get_list_type(java_list_name: str) -> ListType | None:
    """Return the list type for a Java list type name such as ``[int``.

    Returns ``None`` when the element type is not known.
    """
    java_name = java_list_name.removeprefix("[")
    if java_name.startswith("["):
        inner = get_list_type(java_name)
        return ListType(inner) if inner is not None else None

    element = _element_types.get(java_name)
    if element is None:
        element = _registered_types.get(java_name)
    if element is None:
        element = get_exception_class(java_name)
    if element is None:
        return None
    return ListType(element)


def list_fixed_typed_len_tag(tag: int) -> bool:
    """Whether ``tag`` is a compact fixed-length typed list tag."""
    return LIST_FIXED_TYPED_LEN_MIN <= tag <= LIST_FIXED_TYPED_LEN_MAX


def list_fixed_untyped_len_tag(tag: int) -> bool:
    """Whether ``tag`` is a compact fixed-length untyped list tag."""
    return LIST_FIXED_UNTYPED_LEN_MIN <= tag <= LIST_FIXED_UNTYPED_LEN_MAX


def typed_list_tag(tag: int) -> bool:
    """Whether ``tag`` starts a typed list."""
    return tag in (BC_LIST_FIXED, BC_LIST_VARIABLE) or list_fixed_typed_len_tag(tag)


def untyped_list_tag(tag: int) -> bool:
    """Whether ``tag`` starts an untyped list."""
    return tag in (BC_LIST_FIXED_UNTYPED, BC_LIST_VARIABLE_UNTYPED) or list_fixed_untyped_len_tag(
        tag
    )


def fixed_list_length(tag: int) -> int | None:
    """Return the length a compact list tag carries.

    Returns ``None`` for list tags whose length follows the tag or which are
    variable-length, and raises :class:`HessianDecodeError` for non-list tags.
    """
    if list_fixed_typed_len_tag(tag):
        return tag - LIST_FIXED_TYPED_LEN_MIN
    if list_fixed_untyped_len_tag(tag):
        return tag - LIST_FIXED_UNTYPED_LEN_MIN
    if typed_list_tag(tag) or untyped_list_tag(tag):
        return None
    raise HessianDecodeError(f"error list tag: {tag:#x}")