# bizdesk/domains/ai/functions.py

"""
AI 어시스턴트에 제공하는 함수 선언(function declarations)과 프롬프트 정의입니다.

선언은 Gemini function calling 형식의 dict이며, 실제 실행은 하지 않고
사용자 확인 메시지 또는 시뮬레이션 결과로만 응답합니다.
"""

import json
from typing import Any, Dict, List


def _string(description: str, **extra: Any) -> Dict[str, Any]:
    return {"type": "string", "description": description, **extra}


def _number(description: str) -> Dict[str, Any]:
    return {"type": "number", "description": description}


def _line_items(description: str) -> Dict[str, Any]:
    return {
        "type": "array",
        "description": description,
        "items": {
            "type": "object",
            "properties": {
                "description": _string("Description of the item"),
                "quantity": _number("Quantity of the item"),
                "unitPrice": _number("Unit price of the item"),
                "discount": _number("Discount for the item (percentage)"),
                "taxRate": _number("Tax rate for the item (percentage)"),
            },
            "required": ["description", "quantity", "unitPrice"],
        },
    }


_CUSTOMER_PROPERTIES = {
    "companyName": _string("Name of the customer company"),
    "contactPerson": _string("Name of the contact person"),
    "email": _string("Email address of the customer"),
    "phoneNumber": _string("Phone number of the customer"),
    "billingAddress": _string("Billing address of the customer"),
    "vatId": _string("VAT ID or BTW-nummer of the customer"),
    "preferredLanguage": _string('Preferred language for documents (e.g., "en", "nl")'),
}

_CONVERT_OFFER = {
    "name": "convert_offer_to_invoice",
    "description": "Convert an offer to an invoice",
    "parameters": {
        "type": "object",
        "properties": {
            "offerId": _string("ID of the offer to convert"),
            "dueDate": _string("Due date for the invoice (ISO format)"),
        },
        "required": ["offerId"],
    },
}


# =============================================================================
# 1. 대화형 어시스턴트 (/ai/chat) 함수
# =============================================================================
CHAT_FUNCTIONS: List[Dict[str, Any]] = [
    {
        "name": "create_customer",
        "description": "Create a new customer",
        "parameters": {
            "type": "object",
            "properties": {
                **_CUSTOMER_PROPERTIES,
                "shippingAddress": _string("Shipping address of the customer (if different from billing)"),
                "notes": _string("Additional notes about the customer"),
            },
            "required": ["companyName"],
        },
    },
    {
        "name": "create_document_draft",
        "description": "Create a draft offer or invoice",
        "parameters": {
            "type": "object",
            "properties": {
                "type": _string("Type of document to create", enum=["OFFER", "INVOICE"]),
                "customerId": _string("ID of the customer"),
                "languageCode": _string('Language code for the document (e.g., "en", "nl")'),
                "dueDate": _string("Due date for the document (ISO format)"),
                "validUntil": _string("Valid until date for offers (ISO format)"),
                "lineItems": _line_items("Line items for the document"),
                "notes": _string("Additional notes for the document"),
            },
            "required": ["type", "customerId", "languageCode", "lineItems"],
        },
    },
    {
        "name": "get_customers",
        "description": "Get a list of customers",
        "parameters": {
            "type": "object",
            "properties": {
                "search": _string("Search term for customer name or contact person"),
                "limit": _number("Maximum number of customers to return"),
            },
        },
    },
    {
        "name": "get_documents",
        "description": "Get a list of documents (offers or invoices)",
        "parameters": {
            "type": "object",
            "properties": {
                "type": _string("Type of documents to retrieve", enum=["OFFER", "INVOICE"]),
                "status": _string("Status of documents to retrieve (comma-separated for multiple)"),
                "customerId": _string("Filter by customer ID"),
                "limit": _number("Maximum number of documents to return"),
            },
            "required": ["type"],
        },
    },
    {
        "name": "update_template",
        "description": "Update a document template",
        "parameters": {
            "type": "object",
            "properties": {
                "templateId": _string("ID of the template to update"),
                "name": _string("Name of the template"),
                "content": _string("Content of the template (HTML/JSON)"),
            },
            "required": ["templateId"],
        },
    },
    _CONVERT_OFFER,
]


# =============================================================================
# 2. 단발성 작업 요청 (/ai/function) 함수
# =============================================================================
ACTION_FUNCTIONS: List[Dict[str, Any]] = [
    {
        "name": "create_customer",
        "description": "Create a new customer record",
        "parameters": {
            "type": "object",
            "properties": _CUSTOMER_PROPERTIES,
            "required": ["companyName"],
        },
    },
    {
        "name": "create_offer_draft",
        "description": "Create a new offer draft",
        "parameters": {
            "type": "object",
            "properties": {
                "customerId": _string("ID of the customer for this offer"),
                "languageCode": _string("Language code for the offer (en or nl)"),
                "validUntil": _string("Date until which the offer is valid (YYYY-MM-DD)"),
                "lineItems": _line_items("Line items for the offer"),
                "notes": _string("Additional notes for the offer"),
            },
            "required": ["customerId", "languageCode", "lineItems"],
        },
    },
    {
        "name": "create_invoice_draft",
        "description": "Create a new invoice draft",
        "parameters": {
            "type": "object",
            "properties": {
                "customerId": _string("ID of the customer for this invoice"),
                "languageCode": _string("Language code for the invoice (en or nl)"),
                "dueDate": _string("Due date for the invoice (YYYY-MM-DD)"),
                "lineItems": _line_items("Line items for the invoice"),
                "notes": _string("Additional notes for the invoice"),
            },
            "required": ["customerId", "languageCode", "lineItems"],
        },
    },
    _CONVERT_OFFER,
    {
        "name": "get_customer_by_name_or_email",
        "description": "Find a customer by name or email",
        "parameters": {
            "type": "object",
            "properties": {"query": _string("Customer name or email to search for")},
            "required": ["query"],
        },
    },
    {
        "name": "get_document_by_number",
        "description": "Find a document by its number",
        "parameters": {
            "type": "object",
            "properties": {
                "documentNumber": _string(
                    "Document number to search for (e.g., INV-2025-0001 or OFFER-2025-0001)"
                ),
            },
            "required": ["documentNumber"],
        },
    },
]


# =============================================================================
# 3. 프롬프트
# =============================================================================
def chat_system_instruction(company_name: str, user_name: str, user_email: str) -> str:
    return f"""You are an AI assistant for "{company_name}" integrated into a multilingual (Dutch/English) invoicing application.
Your task is to help the user manage customers, offers, invoices, and templates.
You can call functions to perform actions in the system.

Current user: {user_name} ({user_email})
Company: {company_name}

Follow these guidelines:
1. Be concise and professional in your responses
2. For new customers or documents, collect necessary information before calling functions
3. Handle language choices properly (default: English)
4. Always confirm before taking critical actions
5. Respect Dutch language requests and respond in Dutch when asked
"""


ACTION_CONTEXT = """You are an AI assistant that can help the user perform actions in their invoicing system.
You have access to functions that can create customers, draft offers, draft invoices, and more.
When the user asks you to perform a task, determine if you can use one of the available functions.
If you need more information to execute a function, ask the user for it.
Always explain what you're doing and get confirmation before executing critical actions.
"""

FALLBACK_REPLY = "I understood your request but I'm not sure how to help with that specific task yet."


def confirmation_message(name: str, args: Dict[str, Any]) -> str:
    """
    어시스턴트가 요청한 함수 호출에 대해 사용자에게 보여줄 확인 메시지를 만듭니다.
    """
    details = json.dumps(args, indent=2, ensure_ascii=False)
    document_type = str(args.get("type", "document")).lower()
    if name == "create_customer":
        return (
            "I'd be happy to create a new customer for you. Before I do that, let me confirm the details:"
            f"\n\n{details}\n\nWould you like me to proceed with creating this customer?"
        )
    if name == "create_document_draft":
        return f"I can create a draft {document_type} for you. Here are the details:\n\n{details}\n\nWould you like me to proceed?"
    if name == "get_customers":
        return "I can help you find customers. Let me search for that information."
    if name == "get_documents":
        return f"I'll find the {document_type}s for you."
    if name == "update_template":
        return "I can help you update that template. Would you like to see a preview first?"
    if name == "convert_offer_to_invoice":
        return "I can convert that offer to an invoice. Would you like me to proceed?"
    return "I understand what you want to do, but I need to implement that function first."
