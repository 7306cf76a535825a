"""Java language, utility and reflection exceptions."""

from __future__ import annotations

from hessiankit.throwable import JavaThrowable, StackTraceElement


class StringIndexOutOfBoundsException(JavaThrowable):
    """``java.lang.StringIndexOutOfBoundsException``."""

    java_class_name = "java.lang.StringIndexOutOfBoundsException"


class TimeoutException(JavaThrowable):
    """``java.util.concurrent.TimeoutException``."""

    java_class_name = "java.util.concurrent.TimeoutException"


class TooManyListenersException(JavaThrowable):
    """``java.util.TooManyListenersException``."""

    java_class_name = "java.util.TooManyListenersException"


class TypeNotPresentException(JavaThrowable):
    """``java.lang.TypeNotPresentException``, naming the missing type."""

    java_class_name = "java.lang.TypeNotPresentException"

    def __init__(
        self,
        type_name: str = "",
        detail_message: str = "",
        *,
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
        self.type_name = type_name


class UndeclaredThrowableException(JavaThrowable):
    """``java.lang.reflect.UndeclaredThrowableException``.

    Carries the checked throwable that was not declared; when none is given
    an empty throwable stands in for it.
    """

    java_class_name = "java.lang.reflect.UndeclaredThrowableException"

    def __init__(
        self,
        detail_message: str = "",
        undeclared_throwable: JavaThrowable | None = None,
        *,
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
        self.undeclared_throwable = (
            undeclared_throwable if undeclared_throwable is not None else JavaThrowable()
        )


class UnknownFormatConversionException(JavaThrowable):
    """``java.util.UnknownFormatConversionException`` for an unknown conversion."""

    java_class_name = "java.util.UnknownFormatConversionException"

    def __init__(
        self,
        conversion: str = "",
        *,
        detail_message: str = "",
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
        self.conversion = conversion

    def __str__(self) -> str:
        return f"Conversion = '{self.conversion}'"


class UnknownFormatFlagsException(JavaThrowable):
    """``java.util.UnknownFormatFlagsException`` for unknown format flags."""

    java_class_name = "java.util.UnknownFormatFlagsException"

    def __init__(
        self,
        flags: str = "",
        *,
        detail_message: str = "",
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
        self.flags = flags

    def __str__(self) -> str:
        return "Flags = " + self.flags


class UnmodifiableClassException(JavaThrowable):
    """``java.lang.instrument.UnmodifiableClassException``."""

    java_class_name = "java.lang.instrument.UnmodifiableClassException"


class UnsupportedOperationException(JavaThrowable):
    """``java.lang.UnsupportedOperationException``."""

    java_class_name = "java.lang.UnsupportedOperationException"


class WrongMethodTypeException(JavaThrowable):
    """``java.lang.invoke.WrongMethodTypeException``."""

    java_class_name = "java.lang.invoke.WrongMethodTypeException"