# ruff: noqa: E501

import os
from typing import Callable

from pydantic import SecretStr


class Config:

    log_level: str
    web_timeout_s: int
    web_download_chunk_size: int
    whatsapp_api_base_url: str
    whatsapp_api_version: str

    whatsapp_bot_token: SecretStr

    def __init__(
        self,
        def_log_level: str = "INFO",
        def_web_timeout_s: int = 10,
        def_web_download_chunk_size: int = 8192,
        def_whatsapp_api_base_url: str = "https://graph.facebook.com",
        def_whatsapp_api_version: str = "v23.0",
        def_whatsapp_bot_token: SecretStr = SecretStr("invalid"),
    ):
        # @formatter:off
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.web_timeout_s = int(self.__env("WEB_TIMEOUT_S", lambda: str(def_web_timeout_s)))
        self.web_download_chunk_size = int(self.__env("WEB_DOWNLOAD_CHUNK_SIZE", lambda: str(def_web_download_chunk_size)))
        self.whatsapp_api_base_url = self.__env("WHATSAPP_API_BASE_URL", lambda: def_whatsapp_api_base_url).rstrip("/")
        self.whatsapp_api_version = self.__env("WHATSAPP_API_VERSION", lambda: def_whatsapp_api_version)

        self.whatsapp_bot_token = self.__senv("WHATSAPP_BOT_TOKEN", lambda: def_whatsapp_bot_token)
        # @formatter:on

    @property
    def whatsapp_api_url(self) -> str:
        return f"{self.whatsapp_api_base_url}/{self.whatsapp_api_version}"

    @staticmethod
    def __env(name: str, default: Callable[[], str]) -> str:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()

    @staticmethod
    def __senv(name: str, default: Callable[[], SecretStr]) -> SecretStr:
        env_value = os.environ.get(name, "").strip()
        return SecretStr(env_value) if env_value else default()


config = Config()
