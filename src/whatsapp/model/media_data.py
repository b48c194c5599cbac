from pydantic import BaseModel, ConfigDict


class MediaData(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/reference/media"""
    model_config = ConfigDict(frozen = True, extra = "ignore")

    id: str
    url: str | None = None
    mime_type: str | None = None
    sha256: str | None = None
    file_size: int | None = None
    messaging_product: str | None = None
