"""Values of ``java.util.Locale`` and ``java.util.UUID``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar


class LocaleEnum(IntEnum):
    """The predefined ``java.util.Locale`` constants."""

    ENGLISH = 0
    FRENCH = 1
    GERMAN = 2
    ITALIAN = 3
    JAPANESE = 4
    KOREAN = 5
    CHINESE = 6
    SIMPLIFIED_CHINESE = 7
    TRADITIONAL_CHINESE = 8
    FRANCE = 9
    GERMANY = 10
    ITALY = 11
    JAPAN = 12
    KOREA = 13
    CHINA = 14
    PRC = 15
    TAIWAN = 16
    UK = 17
    US = 18
    CANADA = 19
    CANADA_FRENCH = 20
    ROOT = 21


@dataclass(frozen=True)
class Locale:
    """A language with an optional country, as ``java.util.Locale``."""

    id: LocaleEnum
    lang: str
    country: str = ""

    def __str__(self) -> str:
        if self.country:
            return f"{self.lang}_{self.country}"
        return self.lang


@dataclass
class LocaleHandle:
    """The serialized form of a locale: its string representation."""

    value: str = ""

    java_class_name: ClassVar[str] = "com.alibaba.com.caucho.hessian.io.LocaleHandle"


@dataclass
class UUID:
    """A ``java.util.UUID`` held as its string form."""

    value: str = ""

    java_class_name: ClassVar[str] = "java.util.UUID"

    def __str__(self) -> str:
        return self.value


def _build_locales() -> tuple[Locale, ...]:
    e = LocaleEnum
    simplified = Locale(e.SIMPLIFIED_CHINESE, "zh", "CN")
    traditional = Locale(e.TRADITIONAL_CHINESE, "zh", "TW")
    table = {
        e.ENGLISH: Locale(e.ENGLISH, "en"),
        e.FRENCH: Locale(e.FRENCH, "fr"),
        e.GERMAN: Locale(e.GERMAN, "de"),
        e.ITALIAN: Locale(e.ITALIAN, "it"),
        e.JAPANESE: Locale(e.JAPANESE, "ja"),
        e.KOREAN: Locale(e.KOREAN, "ko"),
        e.CHINESE: Locale(e.CHINESE, "zh"),
        e.SIMPLIFIED_CHINESE: simplified,
        e.TRADITIONAL_CHINESE: traditional,
        e.FRANCE: Locale(e.FRANCE, "fr", "FR"),
        e.GERMANY: Locale(e.GERMANY, "de", "DE"),
        e.ITALY: Locale(e.ITALY, "it", "it"),
        e.JAPAN: Locale(e.JAPAN, "ja", "JP"),
        e.KOREA: Locale(e.KOREA, "ko", "KR"),
        e.CHINA: simplified,
        e.PRC: simplified,
        e.TAIWAN: traditional,
        e.UK: Locale(e.UK, "en", "GB"),
        e.US: Locale(e.US, "en", "US"),
        e.CANADA: Locale(e.CANADA, "en", "CA"),
        e.CANADA_FRENCH: Locale(e.CANADA_FRENCH, "fr", "CA"),
        e.ROOT: Locale(e.ROOT, ""),
    }
    return tuple(table[member] for member in LocaleEnum)


_LOCALES = _build_locales()
_LOCALE_MAP = {str(locale): locale for locale in _LOCALES}
_EMPTY_LOCALE = Locale(LocaleEnum.ENGLISH, "", "")


def to_locale(e: LocaleEnum) -> Locale:
    """Return the predefined locale for a constant."""
    return _LOCALES[LocaleEnum(e)]


def get_locale_from_handler(handle: LocaleHandle) -> Locale:
    """Return the locale named by a handle; an unknown name gives an empty locale."""
    return _LOCALE_MAP.get(handle.value, _EMPTY_LOCALE)