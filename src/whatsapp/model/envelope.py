from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

from whatsapp.model.error_payload import ErrorPayload

T = TypeVar("T", bound = BaseModel)


class Success(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen = True)

    ok: Literal[True] = True
    raw: T


class Failure(BaseModel):
    model_config = ConfigDict(frozen = True)

    ok: Literal[False] = False
    error: ErrorPayload
