from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError

DEFAULT_ERROR_STATUS = 500


class ProviderError(BaseModel):
    """https://developers.facebook.com/docs/graph-api/guides/error-handling"""
    model_config = ConfigDict(frozen = True, extra = "ignore")

    message: str | None = None
    type: str | None = None
    code: int | None = None
    error_subcode: int | None = None
    fbtrace_id: str | None = None
    error_data: dict | None = None


class ErrorPayload(BaseModel):
    model_config = ConfigDict(frozen = True)

    status: int
    body: Any = None
    is_error: Literal[True] = True
    provider_error: ProviderError | None = None

    @classmethod
    def from_raw(cls, status: int | None, body: Any) -> "ErrorPayload":
        return cls(
            status = status if status is not None else DEFAULT_ERROR_STATUS,
            body = body,
            provider_error = _parse_provider_error(body),
        )


def _parse_provider_error(body: Any) -> ProviderError | None:
    # Graph API errors look like {"error": {"message": ..., "code": ...}}
    if not isinstance(body, dict) or not isinstance(body.get("error"), dict):
        return None
    try:
        return ProviderError.model_validate(body["error"])
    except ValidationError:
        return None
