import os

from util import log
from util.error_codes import MISSING_TRANSPORT_RESPONSE
from util.errors import InternalError, MediaFileNotFoundError
from whatsapp.model.ack import SuccessAck, TransferAck
from whatsapp.model.envelope import Failure, Success
from whatsapp.model.error_payload import ErrorPayload
from whatsapp.model.media_data import MediaData
from whatsapp.model.media_types import to_content_type_header
from whatsapp.sdk.response_classifier import classify
from whatsapp.sdk.whatsapp_transport import WhatsAppTransport

MESSAGING_PRODUCT = "whatsapp"


class WhatsAppMediasAPI:
    """https://developers.facebook.com/docs/whatsapp/cloud-api/reference/media"""

    __transport: WhatsAppTransport

    def __init__(self, transport: WhatsAppTransport):
        self.__transport = transport

    def get_media(self, media_id: str) -> Success[MediaData] | Failure:
        log.t(f"Getting media #{media_id}")
        raw = self.__transport.send(http_method = "get", endpoint = f"/{media_id}")
        return classify(raw, MediaData)

    def download_media(
        self,
        url: str,
        file_path: str,
        media_type: str,
    ) -> Success[TransferAck] | Failure:
        """
        Downloads the media behind a (short-lived) media URL into a local file.

        The media type is not checked against the supported types, since the Cloud API
        may let more types through than it documents.

        Parameters:
        url (str): The media URL, as returned by `get_media`.
        file_path (str): Where to store the media, e.g. "tmp/downloaded_image.png". Overwritten if present.
        media_type (str): The media type, e.g. "audio/mp4".
        """
        log.t(f"Downloading media into '{file_path}'")
        headers = {"Content-Type": to_content_type_header(media_type)}
        raw = self.__transport.stream_get(url = url, headers = headers)
        if raw is None:
            raise InternalError(log.e("No download response received from the transport"), MISSING_TRANSPORT_RESPONSE)
        if raw.status != 200:
            log.w(f"  Media download failed with HTTP_{raw.status}", raw.body)
            return Failure(error = ErrorPayload.from_raw(raw.status, raw.body))
        with open(file_path, "wb") as sink:
            sink.write(raw.body or b"")
        log.t(f"Media stored into '{file_path}'")
        return Success[TransferAck](raw = TransferAck(success = True, status = raw.status, body = raw.body))

    def upload_media(
        self,
        sender_id: int | str,
        file_path: str,
        media_type: str,
    ) -> Success[MediaData] | Failure:
        """
        Uploads a local file so it can be attached to messages.

        Parameters:
        sender_id (int | str): The sender's phone number ID.
        file_path (str): Path to a local file, e.g. "tmp/whatsapp.png".
        media_type (str): The media type, e.g. "image/png".

        Raises:
        MediaFileNotFoundError: When `file_path` is not an existing file. Nothing is sent in that case.
        """
        if not os.path.isfile(file_path):
            raise MediaFileNotFoundError(file_path)
        log.t(f"Uploading '{file_path}' as {media_type} for sender #{sender_id}")
        try:
            source = open(file_path, "rb")
        except FileNotFoundError as e:
            raise MediaFileNotFoundError(file_path) from e
        with source:
            params = {
                "messaging_product": MESSAGING_PRODUCT,
                "file": (os.path.basename(file_path), source, media_type),
                "type": media_type,
            }
            raw = self.__transport.send(
                http_method = "post",
                endpoint = f"/{sender_id}/media",
                params = params,
                multipart = True,
            )
        return classify(raw, MediaData)

    def delete_media(self, media_id: str) -> Success[SuccessAck] | Failure:
        log.t(f"Deleting media #{media_id}")
        raw = self.__transport.send(http_method = "delete", endpoint = f"/{media_id}")
        return classify(raw, SuccessAck)
