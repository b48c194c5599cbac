from typing import Any

from pydantic import BaseModel, ConfigDict


class SuccessAck(BaseModel):
    model_config = ConfigDict(frozen = True, extra = "ignore")

    success: bool


class TransferAck(BaseModel):
    """Echoes the outcome of a download instead of provider metadata"""
    model_config = ConfigDict(frozen = True)

    success: bool
    status: int
    body: Any = None
