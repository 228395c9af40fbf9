# bizdesk/domains/models/__init__.py

"""
모든 도메인의 SQLModel 모델을 한 곳에서 임포트하여
SQLModel.metadata가 모든 테이블을 인식하도록 보장합니다.
(create_db_and_tables, Alembic env.py, 테스트 conftest 에서 사용)
"""

# usr (User)
from bizdesk.domains.usr.models import User

# corp (Company, CompanyTranslation)
from bizdesk.domains.corp.models import Company, CompanyTranslation

# doc (Customer, Document)
from bizdesk.domains.doc.models import Customer, Document, DocumentStatus, DocumentType

# tmpl (Template)
from bizdesk.domains.tmpl.models import Template

__all__ = [
    "User",
    "Company",
    "CompanyTranslation",
    "Customer",
    "Document",
    "DocumentStatus",
    "DocumentType",
    "Template",
]
