# bizdesk/utils/validators.py

"""
입력값 검증 함수 모음입니다. 모든 함수는 예외를 던지지 않고 bool을 반환합니다.
"""

import math
import re
from typing import Any, Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PHONE_PATTERN = re.compile(r"^[\d\s\-+()]+$")
VAT_ID_PATTERN = re.compile(r"^[A-Z]{2}[\dA-Z]{8,12}$")
MIN_PHONE_DIGITS = 10

_url_adapter = TypeAdapter(AnyUrl)


def is_valid_email(email: Optional[str]) -> bool:
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_url(url: Optional[str]) -> bool:
    """스킴을 포함한 절대 URL인지 검사합니다 (예: https://example.com)."""
    if not isinstance(url, str) or not url:
        return False
    try:
        _url_adapter.validate_python(url)
    except ValidationError:
        return False
    return True


def is_valid_phone(phone: Optional[str]) -> bool:
    """숫자, 공백, -, +, 괄호만 허용하며 숫자가 10자리 이상이어야 합니다."""
    if not isinstance(phone, str) or PHONE_PATTERN.fullmatch(phone) is None:
        return False
    return sum(ch.isdigit() for ch in phone) >= MIN_PHONE_DIGITS


def is_empty(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_required(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def has_min_length(value: Optional[str], min_length: int) -> bool:
    return value is not None and len(value.strip()) >= min_length


def has_max_length(value: Optional[str], max_length: int) -> bool:
    return value is None or len(value.strip()) <= max_length


def is_in_range(value: float, minimum: float, maximum: float) -> bool:
    return minimum <= value <= maximum


def is_valid_vat_id(vat_id: Optional[str]) -> bool:
    """
    EU VAT 번호 형식(국가코드 2자리 + 영숫자 8~12자리)인지 검사합니다.
    공백은 무시하고 대소문자를 구분하지 않습니다.
    """
    if not isinstance(vat_id, str):
        return False
    normalized = re.sub(r"\s+", "", vat_id).upper()
    return VAT_ID_PATTERN.fullmatch(normalized) is not None


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def is_positive_number(value: Any) -> bool:
    number = _as_number(value)
    return number is not None and number > 0


def is_non_negative_number(value: Any) -> bool:
    number = _as_number(value)
    return number is not None and number >= 0
