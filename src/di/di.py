from __future__ import annotations

from typing import TYPE_CHECKING

from util.config import Config
from util.config import config as default_config

if TYPE_CHECKING:
    from whatsapp.sdk.whatsapp_medias_api import WhatsAppMediasAPI
    from whatsapp.sdk.whatsapp_transport import WhatsAppTransport


class DI:

    _config: Config
    # SDKs
    _whatsapp_transport: "WhatsAppTransport | None"
    _whatsapp_medias_api: "WhatsAppMediasAPI | None"

    def __init__(self, config: Config | None = None):
        self._config = config or default_config
        # SDKs
        self._whatsapp_transport = None
        self._whatsapp_medias_api = None

    # === Cloning ===

    def clone(self, config: Config | None = None) -> "DI":
        return DI(config or self._config)

    # === Configuration ===

    @property
    def config(self) -> Config:
        return self._config

    # === SDKs ===

    @property
    def whatsapp_transport(self) -> "WhatsAppTransport":
        if self._whatsapp_transport is None:
            from whatsapp.sdk.whatsapp_transport import WhatsAppTransport
            self._whatsapp_transport = WhatsAppTransport(self._config)
        return self._whatsapp_transport

    @property
    def whatsapp_medias_api(self) -> "WhatsAppMediasAPI":
        if self._whatsapp_medias_api is None:
            from whatsapp.sdk.whatsapp_medias_api import WhatsAppMediasAPI
            self._whatsapp_medias_api = WhatsAppMediasAPI(self.whatsapp_transport)
        return self._whatsapp_medias_api
