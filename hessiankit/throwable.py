"""Java throwable values and the registry of known exception classes."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import ClassVar

_THROWABLE_FIELDS = frozenset(
    {"detailMessage", "suppressedExceptions", "stackTrace", "cause"}
)

_registry: dict[str, type[JavaThrowable]] = {}
_registry_lock = threading.Lock()


@dataclass
class StackTraceElement:
    """One frame of a Java stack trace."""

    declaring_class: str = ""
    method_name: str = ""
    file_name: str = ""
    line_number: int = 0


class JavaThrowable(Exception):
    """Base class for exceptions that mirror a Java throwable.

    Subclasses that set ``java_class_name`` are registered under that name.
    """

    java_class_name: ClassVar[str] = ""

    def __init__(
        self,
        detail_message: str = "",
        *,
        cause: JavaThrowable | None = None,
        stack_trace: list[StackTraceElement] | None = None,
        suppressed_exceptions: list[JavaThrowable] | None = None,
        serial_version_uid: int = 0,
    ) -> None:
        super().__init__(detail_message)
        self.detail_message = detail_message
        self.cause = cause
        self.stack_trace = list(stack_trace) if stack_trace is not None else []
        self.suppressed_exceptions = (
            list(suppressed_exceptions) if suppressed_exceptions is not None else []
        )
        self.serial_version_uid = serial_version_uid

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        name = cls.__dict__.get("java_class_name")
        if isinstance(name, str) and name:
            _registry[name] = cls

    def __str__(self) -> str:
        return self.detail_message

    def get_stack_trace(self) -> list[StackTraceElement]:
        """Return the stack trace, as ``getStackTrace`` does in Java."""
        return self.stack_trace


class UnknownException(JavaThrowable):
    """A throwable whose Java class has no dedicated Python class."""

    def __init__(
        self,
        detail_message: str = "",
        *,
        name: str | None = None,
        cause: JavaThrowable | None = None,
        stack_trace: list[StackTraceElement] | None = None,
        suppressed_exceptions: list[JavaThrowable] | None = None,
        serial_version_uid: int = 0,
    ) -> None:
        super().__init__(
            detail_message,
            cause=cause,
            stack_trace=stack_trace,
            suppressed_exceptions=suppressed_exceptions,
            serial_version_uid=serial_version_uid,
        )
        self.name = name if name is not None else type(self).java_class_name
        self.java_class_name = self.name

    def __str__(self) -> str:
        return f"throw {self.name} : {self.detail_message}"


def _make_unknown_exception_class(java_name: str) -> type[UnknownException]:
    short_name = java_name.rsplit(".", 1)[-1] or "UnknownException"
    return type(
        short_name,
        (UnknownException,),
        {"java_class_name": java_name, "__module__": __name__},
    )


def get_exception_class(java_name: str) -> type[JavaThrowable] | None:
    """Return the exception class registered for a Java class name, if any."""
    return _registry.get(java_name)


def check_and_get_exception(
    java_name: str, field_names: list[str]
) -> tuple[type[JavaThrowable] | None, bool]:
    """Decide whether a Java class with these fields is a throwable.

    A class is a throwable when its fields include ``detailMessage``,
    ``suppressedExceptions``, ``stackTrace`` and ``cause``. For such a class
    the registered exception class is returned, registering a new
    :class:`UnknownException` subclass first if none exists.
    """
    if len(field_names) < 4:
        return None, False
    count = sum(1 for name in field_names if name in _THROWABLE_FIELDS)
    if count != 4:
        return None, False
    with _registry_lock:
        existing = _registry.get(java_name)
        if existing is not None:
            return existing, True
        _make_unknown_exception_class(java_name)
        return _registry.get(java_name), True