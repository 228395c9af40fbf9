# bizdesk/utils/formatters.py

"""
표시용 포맷팅 함수 모음입니다.

날짜와 통화는 Babel(CLDR 데이터)을 사용하여 로케일에 맞게 표시합니다.
로케일은 "en-US", "nl_NL" 형식을 모두 받으며, 알 수 없는 로케일은 en-US로 대체합니다.
"""

import math
import re
from datetime import date, datetime
from typing import Optional, Union

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from babel import numbers as babel_numbers

DEFAULT_LOCALE = "en-US"
DEFAULT_CURRENCY = "EUR"
DEFAULT_CURRENCY_LOCALE = "nl-NL"
FILE_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")

# JavaScript parseFloat 과 같이 문자열 앞부분의 숫자만 해석합니다.
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_LEADING_INFINITY = re.compile(r"^\s*([+-]?)Infinity")

DateLike = Union[date, datetime, str]


def _locale(locale: Optional[str]) -> Locale:
    identifier = (locale or DEFAULT_LOCALE).replace("-", "_")
    try:
        return Locale.parse(identifier)
    except (UnknownLocaleError, ValueError):
        return Locale.parse(DEFAULT_LOCALE.replace("-", "_"))


def _to_datetime(value: DateLike) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return None


def format_date(value: DateLike, locale: str = DEFAULT_LOCALE, format: str = "medium") -> str:
    """
    날짜를 로케일 형식으로 표시합니다. 해석할 수 없는 값은 "Invalid Date"를 반환합니다.
    """
    parsed = _to_datetime(value)
    if parsed is None:
        return "Invalid Date"
    return babel_dates.format_date(parsed.date(), format=format, locale=_locale(locale))


def format_datetime(value: DateLike, locale: str = DEFAULT_LOCALE, format: str = "medium") -> str:
    parsed = _to_datetime(value)
    if parsed is None:
        return "Invalid Date"
    return babel_dates.format_datetime(parsed, format=format, locale=_locale(locale))


def format_currency(
    amount: Union[float, int, str],
    currency: str = DEFAULT_CURRENCY,
    locale: str = DEFAULT_CURRENCY_LOCALE,
) -> str:
    """
    금액을 통화 형식으로 표시합니다. 문자열 금액은 parse_number 규칙으로 해석합니다.

    >>> format_currency(1234.5)  # doctest: +SKIP
    '€ 1.234,50'
    """
    value = parse_number(amount) if isinstance(amount, str) else float(amount)
    return babel_numbers.format_currency(value, currency, locale=_locale(locale))


def _non_finite(value: float) -> Optional[str]:
    """NaN / 무한대는 JavaScript 숫자 표기("NaN", "Infinity", "-Infinity")로 표시합니다."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    return None


def format_percentage(value: float, decimals: int = 2) -> str:
    return f"{format_number(value, decimals)}%"


def format_number(value: float, decimals: int = 2) -> str:
    return _non_finite(value) or f"{value:.{decimals}f}"


def parse_number(value: Union[str, float, int, None]) -> float:
    """
    문자열 앞부분의 숫자를 해석합니다. 숫자가 아니면 0을 반환합니다.

    "3.14" -> 3.14, "42px" -> 42.0, "abc" -> 0
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return 0 if math.isnan(value) else float(value)

    match = _LEADING_FLOAT.match(value)
    if match:
        return float(match.group(1))
    match = _LEADING_INFINITY.match(value)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf
    return 0


def truncate(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def capitalize(text: str) -> str:
    if not text:
        return ""
    return text[0].upper() + text[1:].lower()


def format_file_size(size: float) -> str:
    """
    바이트 수를 1024 단위(Bytes, KB, MB, GB)로 표시합니다. 소수점은 최대 2자리입니다.

    0 -> "0 Bytes", 1024 -> "1 KB", 1536 -> "1.5 KB", NaN -> "NaN Bytes"
    """
    if size == 0:
        return "0 Bytes"
    non_finite = _non_finite(size)
    if non_finite is not None:
        return f"{non_finite} Bytes"

    magnitude = abs(size)
    index = int(math.floor(math.log(magnitude) / math.log(1024)))
    index = max(0, min(index, len(FILE_SIZE_UNITS) - 1))

    value = math.floor(magnitude / 1024 ** index * 100 + 0.5) / 100
    if size < 0:
        value = -value
    number = str(int(value)) if float(value).is_integer() else f"{value:g}"
    return f"{number} {FILE_SIZE_UNITS[index]}"
