import pytest

from hessiankit.java_util import (
    UUID,
    Locale,
    LocaleEnum,
    LocaleHandle,
    get_locale_from_handler,
    to_locale,
)


def test_uuid_string_and_class_name():
    uuid1 = UUID("065ec58d-a89f-4b64-9c9f-d223ea2e73b6")
    assert str(uuid1) == "065ec58d-a89f-4b64-9c9f-d223ea2e73b6"
    assert UUID.java_class_name == "java.util.UUID"
    assert uuid1 == UUID(value="065ec58d-a89f-4b64-9c9f-d223ea2e73b6")


def test_locale_handle_class_name():
    handle = LocaleHandle("en")
    assert handle.java_class_name == "com.alibaba.com.caucho.hessian.io.LocaleHandle"
    assert get_locale_from_handler(handle) == to_locale(LocaleEnum.ENGLISH)


@pytest.mark.parametrize(
    ("handle_value", "expected"),
    [
        ("en", LocaleEnum.ENGLISH),
        ("fr", LocaleEnum.FRENCH),
        ("de_DE", LocaleEnum.GERMANY),
        ("it", LocaleEnum.ITALIAN),
        ("ja", LocaleEnum.JAPANESE),
        ("ko", LocaleEnum.KOREAN),
        ("zh", LocaleEnum.CHINESE),
        ("zh_CN", LocaleEnum.SIMPLIFIED_CHINESE),
        ("zh_TW", LocaleEnum.TRADITIONAL_CHINESE),
        ("fr_FR", LocaleEnum.FRANCE),
        ("ja_JP", LocaleEnum.JAPAN),
        ("ko_KR", LocaleEnum.KOREA),
        ("zh_CN", LocaleEnum.CHINA),
        ("zh_CN", LocaleEnum.PRC),
        ("zh_TW", LocaleEnum.TAIWAN),
        ("en_GB", LocaleEnum.UK),
        ("en_US", LocaleEnum.US),
        ("en_CA", LocaleEnum.CANADA),
        ("", LocaleEnum.ROOT),
    ],
)
def test_locale_from_handler(handle_value, expected):
    assert get_locale_from_handler(LocaleHandle(handle_value)) == to_locale(expected)


@pytest.mark.parametrize("member", list(LocaleEnum))
def test_handler_round_trip(member):
    locale = to_locale(member)
    assert get_locale_from_handler(LocaleHandle(str(locale))) == locale


def test_aliases_share_locale():
    assert to_locale(LocaleEnum.CHINA) is to_locale(LocaleEnum.SIMPLIFIED_CHINESE)
    assert to_locale(LocaleEnum.PRC).id == LocaleEnum.SIMPLIFIED_CHINESE
    assert to_locale(LocaleEnum.TAIWAN) == to_locale(LocaleEnum.TRADITIONAL_CHINESE)


def test_locale_string_forms():
    assert str(to_locale(LocaleEnum.SIMPLIFIED_CHINESE)) == "zh_CN"
    assert str(to_locale(LocaleEnum.ENGLISH)) == "en"
    assert str(to_locale(LocaleEnum.ROOT)) == ""
    us = to_locale(LocaleEnum.US)
    assert (us.lang, us.country) == ("en", "US")


def test_enum_order_and_count():
    assert len(LocaleEnum) == 22
    assert to_locale(LocaleEnum.ENGLISH).id == 0
    assert to_locale(LocaleEnum.ROOT).id == 21


def test_unknown_handle_gives_empty_locale():
    locale = get_locale_from_handler(LocaleHandle("xx_YY"))
    assert locale == Locale(LocaleEnum.ENGLISH, "", "")
    assert str(locale) == ""