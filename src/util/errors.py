from enum import Enum
from typing import Any

from util.error_codes import INVALID_MEDIA_TYPE, MEDIA_FILE_NOT_FOUND

SUPPORTED_MEDIA_TYPES_DOCS_URL = "https://developers.facebook.com/docs/whatsapp/cloud-api/reference/media#supported-media-types"  # noqa: E501


class ServiceError(Exception):
    error_code: int
    http_status: int
    emoji: str

    def __init__(
        self,
        message: str,
        error_code: int,
        http_status: int = 500,
        emoji: str = "⚠️",
    ):
        super().__init__(message)
        self.error_code = error_code
        self.http_status = http_status
        self.emoji = emoji

    def __str__(self) -> str:
        return self.to_log_string()

    def to_log_string(self) -> str:
        cause_str = f" # Caused by: {self.__cause__}" if self.__cause__ else ""
        return f"[{self.emoji} E{self.error_code}] {super().__str__()}{cause_str}"

    def to_api_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": str(self),
            "emoji": self.emoji,
        }


class InternalError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "⚠️"):
        super().__init__(message, error_code, http_status = 500, emoji = emoji)


class ValidationError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "✏️"):
        super().__init__(message, error_code, http_status = 422, emoji = emoji)


class NotFoundError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "🔍"):
        super().__init__(message, error_code, http_status = 404, emoji = emoji)


class PreconditionError(ServiceError):
    """Local check that failed before any request was sent. Branch on `kind` to read the payload."""

    class Kind(Enum):
        file_not_found = "file_not_found"
        invalid_media_type = "invalid_media_type"

    kind: Kind

    def to_api_dict(self) -> dict[str, Any]:
        return {**super().to_api_dict(), "kind": self.kind.value}


class MediaFileNotFoundError(NotFoundError, PreconditionError):
    kind = PreconditionError.Kind.file_not_found
    file_path: str

    def __init__(self, file_path: str):
        super().__init__(f"Couldn't find file_path: {file_path}", MEDIA_FILE_NOT_FOUND)
        self.file_path = file_path


class InvalidMediaTypeError(ValidationError, PreconditionError):
    kind = PreconditionError.Kind.invalid_media_type
    media_type: str

    def __init__(self, media_type: str):
        message = f"Invalid media type {media_type}. See the supported types at {SUPPORTED_MEDIA_TYPES_DOCS_URL}"
        super().__init__(message, INVALID_MEDIA_TYPE)
        self.media_type = media_type
