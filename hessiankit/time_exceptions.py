"""Java date-time exceptions."""

from __future__ import annotations

from hessiankit.throwable import JavaThrowable


class UnsupportedTemporalTypeException(JavaThrowable):
    """``java.time.temporal.UnsupportedTemporalTypeException``."""

    java_class_name = "java.time.temporal.UnsupportedTemporalTypeException"


class ZoneRulesException(JavaThrowable):
    """``java.time.zone.ZoneRulesException``."""

    java_class_name = "java.time.zone.ZoneRulesException"