from typing import Any

from pydantic import ValidationError

from util import log
from util.error_codes import MISSING_TRANSPORT_RESPONSE
from util.errors import InternalError
from whatsapp.model.envelope import Failure, Success, T
from whatsapp.model.error_payload import ErrorPayload
from whatsapp.model.raw_response import RawResponse


def is_success_status(status: int | None) -> bool:
    return status is not None and 200 <= status <= 299


def carries_error_marker(body: Any) -> bool:
    # the Graph API sometimes answers HTTP 200 with an embedded error object
    return isinstance(body, dict) and "error" in body


def classify(raw: RawResponse | None, success_shape: type[T]) -> Success[T] | Failure:
    """
    Turns a raw transport response into exactly one of the two envelope variants.

    Parameters:
    raw (RawResponse | None): What the transport received; None means the transport produced nothing at all.
    success_shape (type[T]): The model a successful body is parsed into.

    Returns:
    Success[T] | Failure: Never raises for a well-formed raw response.
    """
    if raw is None:
        raise InternalError(log.e("No API response received from the transport"), MISSING_TRANSPORT_RESPONSE)

    if not is_success_status(raw.status) or carries_error_marker(raw.body):
        log.w(f"  Request failed with HTTP_{raw.status}", raw.body)
        return Failure(error = ErrorPayload.from_raw(raw.status, raw.body))

    try:
        parsed = success_shape.model_validate(raw.body)
    except ValidationError as e:
        log.w(f"  Body does not match '{success_shape.__name__}'", e)
        return Failure(error = ErrorPayload.from_raw(raw.status, raw.body))
    return Success[success_shape](raw = parsed)
