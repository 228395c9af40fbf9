"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DOCUMENT_TYPE = sa.Enum("OFFER", "INVOICE", name="documenttype")
DOCUMENT_STATUS = sa.Enum(
    "DRAFT", "SENT", "ACCEPTED", "DECLINED", "EXPIRED", "PAID", "PARTIALLY_PAID", "OVERDUE", "VOIDED",
    name="documentstatus",
)


def _timestamps():
    return (
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=True),
    )


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("address_line1", sa.String(length=255)),
        sa.Column("address_line2", sa.String(length=255)),
        sa.Column("city", sa.String(length=100)),
        sa.Column("postal_code", sa.String(length=20)),
        sa.Column("country", sa.String(length=100)),
        sa.Column("vat_id", sa.String(length=50)),
        sa.Column("phone_number", sa.String(length=50)),
        sa.Column("email", sa.String(length=255)),
        sa.Column("website", sa.String(length=255)),
        sa.Column("bank_account_name", sa.String(length=255)),
        sa.Column("bank_account_number", sa.String(length=50)),
        sa.Column("bank_account_bic", sa.String(length=20)),
        sa.Column("logo_url", sa.String(length=1024)),
        *_timestamps(),
    )
    op.create_index("ix_companies_name", "companies", ["name"])

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("name", sa.String(length=100)),
        sa.Column("image", sa.String(length=1024)),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("companies.id")),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"])
    op.create_index("ix_users_company_id", "users", ["company_id"])

    op.create_table(
        "company_translations",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("companies.id"), nullable=False),
        sa.Column("language_code", sa.String(length=10), nullable=False),
        sa.Column("address_line1", sa.String(length=255)),
        sa.Column("address_line2", sa.String(length=255)),
        sa.Column("payment_terms_text", sa.Text()),
        sa.Column("invoice_footer_text", sa.Text()),
        sa.Column("offer_footer_text", sa.Text()),
        *_timestamps(),
        sa.UniqueConstraint("company_id", "language_code", name="uq_company_translation_language"),
    )
    op.create_index("ix_company_translations_company_id", "company_translations", ["company_id"])

    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("companies.id"), nullable=False),
        sa.Column("company_name", sa.String(length=255), nullable=False),
        sa.Column("contact_person", sa.String(length=255)),
        sa.Column("email", sa.String(length=255)),
        sa.Column("phone_number", sa.String(length=50)),
        sa.Column("billing_address", sa.Text()),
        sa.Column("shipping_address", sa.Text()),
        sa.Column("vat_id", sa.String(length=50)),
        sa.Column("preferred_language", sa.String(length=10), nullable=False),
        sa.Column("notes", sa.Text()),
        *_timestamps(),
    )
    op.create_index("ix_customers_company_id", "customers", ["company_id"])

    op.create_table(
        "templates",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("companies.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", DOCUMENT_TYPE, nullable=False),
        sa.Column("language_code", sa.String(length=10), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("is_default", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_templates_company_id", "templates", ["company_id"])
    op.create_index(
        "uq_templates_default_per_language",
        "templates",
        ["company_id", "type", "language_code"],
        unique=True,
        postgresql_where=sa.text("is_default"),
        sqlite_where=sa.text("is_default = 1"),
    )

    op.create_table(
        "documents",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("companies.id"), nullable=False),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.id"), nullable=False),
        sa.Column("template_id", sa.Integer(), sa.ForeignKey("templates.id")),
        sa.Column("document_number", sa.String(length=50), nullable=False),
        sa.Column("type", DOCUMENT_TYPE, nullable=False),
        sa.Column("status", DOCUMENT_STATUS, nullable=False),
        sa.Column("language_code", sa.String(length=10), nullable=False),
        sa.Column("issue_date", sa.Date(), nullable=False),
        sa.Column("due_date", sa.Date()),
        sa.Column("valid_until", sa.Date()),
        sa.Column("total_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("total_tax", sa.Numeric(12, 2), nullable=False),
        sa.Column("total_discount", sa.Numeric(12, 2), nullable=False),
        sa.Column("payment_terms", sa.Text()),
        sa.Column("notes", sa.Text()),
        *_timestamps(),
    )
    op.create_index("ix_documents_company_id", "documents", ["company_id"])
    op.create_index("ix_documents_customer_id", "documents", ["customer_id"])
    op.create_index("ix_documents_template_id", "documents", ["template_id"])
    op.create_index("ix_documents_document_number", "documents", ["document_number"])


def downgrade() -> None:
    op.drop_table("documents")
    op.drop_table("templates")
    op.drop_table("customers")
    op.drop_table("company_translations")
    op.drop_table("users")
    op.drop_table("companies")
    DOCUMENT_STATUS.drop(op.get_bind(), checkfirst=True)
    DOCUMENT_TYPE.drop(op.get_bind(), checkfirst=True)
