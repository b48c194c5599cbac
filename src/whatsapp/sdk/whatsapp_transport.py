import json
from typing import Any

import requests

from util import log
from util.config import Config
from whatsapp.model.raw_response import RawResponse


class WhatsAppTransport:
    """https://developers.facebook.com/docs/whatsapp/cloud-api"""

    __config: Config

    def __init__(self, config: Config):
        self.__config = config

    def send(
        self,
        http_method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        multipart: bool = False,
    ) -> RawResponse:
        method = http_method.upper()
        url = self.__resolve_url(endpoint)
        log.t(f"Sending {method} {url}")
        request_args: dict[str, Any] = {
            "headers": self.__auth_headers(),
            "timeout": self.__config.web_timeout_s,
        }
        if params:
            if method in ("GET", "DELETE"):
                request_args["params"] = params
            elif multipart:
                request_args["data"], request_args["files"] = self.__split_multipart(params)
            else:
                request_args["json"] = params
        response = requests.request(method, url, **request_args)
        log.t(f"Response HTTP-{response.status_code} received for {method} {url}")
        body = self.__decode_content(response.content, response.encoding)
        return RawResponse(status = response.status_code, body = body)

    def stream_get(self, url: str, headers: dict[str, str] | None = None) -> RawResponse:
        log.t("Streaming media from URL")
        request_headers = {**self.__auth_headers(), **(headers or {})}
        timeout = self.__config.web_timeout_s
        with requests.get(url, headers = request_headers, stream = True, timeout = timeout) as response:
            chunks = response.iter_content(chunk_size = self.__config.web_download_chunk_size)
            content = b"".join(chunk for chunk in chunks if chunk)
            log.t(f"Response HTTP-{response.status_code} received ({len(content)} bytes)")
            if response.status_code == 200:
                # media bytes are kept as they are
                return RawResponse(status = response.status_code, body = content)
            body = self.__decode_content(content, response.encoding)
            return RawResponse(status = response.status_code, body = body)

    def __resolve_url(self, endpoint: str) -> str:
        if endpoint.startswith("http://") or endpoint.startswith("https://"):
            return endpoint
        return f"{self.__config.whatsapp_api_url}/{endpoint.lstrip('/')}"

    def __auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.__config.whatsapp_bot_token.get_secret_value()}"}

    @staticmethod
    def __split_multipart(params: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
        # file parts come in as (filename, handle, content_type) tuples
        data = {key: value for key, value in params.items() if not isinstance(value, tuple)}
        files = {key: value for key, value in params.items() if isinstance(value, tuple)}
        return data, files

    @staticmethod
    def __decode_content(content: bytes, encoding: str | None) -> Any:
        if not content:
            return None
        try:
            return json.loads(content)
        except ValueError:
            log.t("Response body is not JSON, keeping it as text")
        try:
            return content.decode(encoding or "utf-8")
        except UnicodeDecodeError:
            return content
