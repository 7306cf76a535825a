"""Java I/O and archive exceptions."""

from __future__ import annotations

from hessiankit.throwable import JavaThrowable, StackTraceElement


class StreamCorruptedException(JavaThrowable):
    """``java.io.StreamCorruptedException``."""

    java_class_name = "java.io.StreamCorruptedException"


class SyncFailedException(JavaThrowable):
    """``java.io.SyncFailedException``."""

    java_class_name = "java.io.SyncFailedException"


class UncheckedIOException(JavaThrowable):
    """``java.io.UncheckedIOException``; a cause is required."""

    java_class_name = "java.io.UncheckedIOException"

    def __init__(
        self,
        detail_message: str,
        cause: JavaThrowable | None,
        *,
        stack_trace: list[StackTraceElement] | None = None,
        suppressed_exceptions: list[JavaThrowable] | None = None,
        serial_version_uid: int = 0,
    ) -> None:
        if cause is None:
            raise ValueError("UncheckedIOException requires a cause")
        super().__init__(
            detail_message,
            cause=cause,
            stack_trace=stack_trace,
            suppressed_exceptions=suppressed_exceptions,
            serial_version_uid=serial_version_uid,
        )


class UTFDataFormatException(JavaThrowable):
    """``java.io.UTFDataFormatException``."""

    java_class_name = "java.io.UTFDataFormatException"


class WriteAbortedException(JavaThrowable):
    """``java.io.WriteAbortedException``, carrying the exception that aborted the write."""

    java_class_name = "java.io.WriteAbortedException"

    def __init__(
        self,
        detail_message: str = "",
        detail: JavaThrowable | None = None,
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
        self.detail = detail


class ZipException(JavaThrowable):
    """``java.util.zip.ZipException``."""

    java_class_name = "java.util.zip.ZipException"