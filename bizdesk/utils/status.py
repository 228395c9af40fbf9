# bizdesk/utils/status.py

"""
문서 상태(DocumentStatus) 표시 및 상태 전이 헬퍼입니다.

상태 전이표는 화면에서 "다음에 가능한 상태"를 안내하기 위한 읽기 전용 정보입니다.
실제로 상태를 변경하는 엔드포인트는 각자의 사전 조건을 검사합니다.
"""

from typing import Dict, List, Tuple

from bizdesk.domains.doc.models import DocumentStatus, DocumentType

# 배지(Badge) 컴포넌트 variant
_BADGE_VARIANTS: Dict[DocumentStatus, str] = {
    DocumentStatus.DRAFT: "gray",
    DocumentStatus.SENT: "blue",
    DocumentStatus.ACCEPTED: "green",
    DocumentStatus.DECLINED: "red",
    DocumentStatus.EXPIRED: "yellow",
    DocumentStatus.PAID: "green",
    DocumentStatus.PARTIALLY_PAID: "yellow",
    DocumentStatus.OVERDUE: "red",
    DocumentStatus.VOIDED: "gray",
}

# variant -> 텍스트/배경 색상 클래스
_VARIANT_COLORS: Dict[str, str] = {
    "gray": "bg-gray-100 text-gray-800",
    "blue": "bg-blue-100 text-blue-800",
    "green": "bg-green-100 text-green-800",
    "red": "bg-red-100 text-red-800",
    "yellow": "bg-yellow-100 text-yellow-800",
}

FINAL_STATUSES = frozenset({DocumentStatus.PAID, DocumentStatus.VOIDED, DocumentStatus.DECLINED})

_TRANSITIONS: Dict[DocumentType, Dict[DocumentStatus, Tuple[DocumentStatus, ...]]] = {
    DocumentType.OFFER: {
        DocumentStatus.DRAFT: (DocumentStatus.SENT, DocumentStatus.VOIDED),
        DocumentStatus.SENT: (
            DocumentStatus.ACCEPTED, DocumentStatus.DECLINED, DocumentStatus.EXPIRED, DocumentStatus.VOIDED,
        ),
        DocumentStatus.ACCEPTED: (DocumentStatus.VOIDED,),
    },
    DocumentType.INVOICE: {
        DocumentStatus.DRAFT: (DocumentStatus.SENT, DocumentStatus.VOIDED),
        DocumentStatus.SENT: (
            DocumentStatus.PAID, DocumentStatus.PARTIALLY_PAID, DocumentStatus.OVERDUE, DocumentStatus.VOIDED,
        ),
        DocumentStatus.PARTIALLY_PAID: (DocumentStatus.PAID, DocumentStatus.OVERDUE, DocumentStatus.VOIDED),
        DocumentStatus.OVERDUE: (DocumentStatus.PAID, DocumentStatus.PARTIALLY_PAID, DocumentStatus.VOIDED),
    },
}


def get_status_badge_variant(status: DocumentStatus) -> str:
    return _BADGE_VARIANTS.get(DocumentStatus(status), "gray")


def get_status_color(status: DocumentStatus) -> str:
    return _VARIANT_COLORS[get_status_badge_variant(status)]


def is_final_status(status: DocumentStatus) -> bool:
    return DocumentStatus(status) in FINAL_STATUSES


def can_edit_document(status: DocumentStatus) -> bool:
    """초안(DRAFT) 상태의 문서만 편집할 수 있습니다."""
    return DocumentStatus(status) == DocumentStatus.DRAFT


def get_available_status_transitions(document_type: DocumentType, status: DocumentStatus) -> List[DocumentStatus]:
    """
    현재 상태에서 안내 가능한 다음 상태 목록을 반환합니다. 전이가 없으면 빈 목록입니다.
    """
    table = _TRANSITIONS.get(DocumentType(document_type), {})
    return list(table.get(DocumentStatus(status), ()))
