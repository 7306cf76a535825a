import pytest

from hessiankit.lang_exceptions import (
    StringIndexOutOfBoundsException,
    TimeoutException,
    TooManyListenersException,
    TypeNotPresentException,
    UndeclaredThrowableException,
    UnknownFormatConversionException,
    UnknownFormatFlagsException,
    UnmodifiableClassException,
    UnsupportedOperationException,
    WrongMethodTypeException,
)
from hessiankit.throwable import JavaThrowable, StackTraceElement, get_exception_class

CLASSES = [
    (StringIndexOutOfBoundsException, "java.lang.StringIndexOutOfBoundsException"),
    (TimeoutException, "java.util.concurrent.TimeoutException"),
    (TooManyListenersException, "java.util.TooManyListenersException"),
    (TypeNotPresentException, "java.lang.TypeNotPresentException"),
    (UndeclaredThrowableException, "java.lang.reflect.UndeclaredThrowableException"),
    (UnknownFormatConversionException, "java.util.UnknownFormatConversionException"),
    (UnknownFormatFlagsException, "java.util.UnknownFormatFlagsException"),
    (UnmodifiableClassException, "java.lang.instrument.UnmodifiableClassException"),
    (UnsupportedOperationException, "java.lang.UnsupportedOperationException"),
    (WrongMethodTypeException, "java.lang.invoke.WrongMethodTypeException"),
]

SIMPLE_NAMES = [
    "java.lang.StringIndexOutOfBoundsException",
    "java.util.concurrent.TimeoutException",
    "java.util.TooManyListenersException",
    "java.lang.instrument.UnmodifiableClassException",
    "java.lang.UnsupportedOperationException",
    "java.lang.invoke.WrongMethodTypeException",
]


@pytest.mark.parametrize("cls, java_name", CLASSES)
def test_java_class_name_and_registry(cls, java_name):
    assert cls.java_class_name == java_name
    assert get_exception_class(java_name) is cls


@pytest.mark.parametrize("java_name", SIMPLE_NAMES)
def test_simple_message_and_stack_trace(java_name):
    cls = get_exception_class(java_name)
    exc = cls("boom")
    assert str(exc) == "boom"
    assert exc.detail_message == "boom"
    assert exc.get_stack_trace() == []


@pytest.mark.parametrize("java_name", SIMPLE_NAMES)
def test_simple_can_be_raised(java_name):
    cls = get_exception_class(java_name)
    with pytest.raises(cls) as info:
        raise cls("raised")
    assert str(info.value) == "raised"
    assert info.value.java_class_name == java_name


def test_stack_trace_is_kept():
    frame = StackTraceElement("Demo", "run", "Demo.java", 7)
    exc = TimeoutException("late", stack_trace=[frame])
    assert exc.get_stack_trace() == [frame]


def test_type_not_present():
    exc = TypeNotPresentException("com.example.Missing", "not found")
    assert exc.type_name == "com.example.Missing"
    assert str(exc) == "not found"


def test_undeclared_throwable_default():
    exc = UndeclaredThrowableException("wrapped")
    assert isinstance(exc.undeclared_throwable, JavaThrowable)
    assert str(exc) == "wrapped"


def test_undeclared_throwable_given():
    inner = UnsupportedOperationException("inner")
    exc = UndeclaredThrowableException("outer", inner)
    assert exc.undeclared_throwable is inner


def test_unknown_format_conversion_message():
    exc = UnknownFormatConversionException("q")
    assert exc.conversion == "q"
    assert str(exc) == "Conversion = 'q'"


def test_unknown_format_flags_message():
    exc = UnknownFormatFlagsException("#+")
    assert exc.flags == "#+"
    assert str(exc) == "Flags = #+"


def test_cause_chain():
    cause = StringIndexOutOfBoundsException("index")
    exc = WrongMethodTypeException("bad type", cause=cause)
    assert exc.cause is cause
    assert exc.cause.detail_message == "index"