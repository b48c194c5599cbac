from typing import Any

from pydantic import BaseModel, ConfigDict


class RawResponse(BaseModel):
    """Status and body exactly as the transport received them, before classification"""
    model_config = ConfigDict(frozen = True)

    status: int | None = None
    body: Any = None
