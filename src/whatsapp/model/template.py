from enum import Enum

from pydantic import BaseModel


class Template(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/business-management-api/message-templates"""

    class Status(Enum):
        pending_deletion = "PENDING_DELETION"
        approved = "APPROVED"
        pending = "PENDING"
        rejected = "REJECTED"

        @classmethod
        def lookup(cls, value) -> "Template.Status | None":
            try:
                return cls(value)
            except ValueError:
                return None

    class Category(Enum):
        authentication = "AUTHENTICATION"
        marketing = "MARKETING"
        utility = "UTILITY"

        @classmethod
        def lookup(cls, value) -> "Template.Category | None":
            try:
                return cls(value)
            except ValueError:
                return None

    id: str
    status: Status
    category: Category
    language: str | None = None
    name: str | None = None
    components_json: list[dict] | None = None
