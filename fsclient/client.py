from __future__ import annotations

from types import TracebackType

import httpx

from fsclient.dispatch import Dispatcher
from fsclient.files import FileServiceApi
from fsclient.logging_conf import get_logger
from fsclient.notify import LoggingNotifier, Notifier
from fsclient.registry import RegistryResolver
from fsclient.session import Scheduler, SessionMonitor, loop_scheduler
from fsclient.settings import ClientSettings
from fsclient.tokens import CookieTokenStore, FileTokenStore, TokenStore

__all__ = ["FsClient"]

logger = get_logger("fsclient.client")


class FsClient:
    """Wires the HTTP client, session monitor, dispatcher, registry and file API.

    Usage:
        async with FsClient(ClientSettings.from_env()) as fs:
            services = await fs.files.list_file_services()

    One instance is one application session: it owns the session monitor,
    so expiry prompts are debounced across everything sent through it.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        notifier: Notifier | None = None,
        token_store: TokenStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        schedule: Scheduler = loop_scheduler,
    ) -> None:
        self.settings = settings or ClientSettings.from_env()
        self.http = httpx.AsyncClient(
            base_url=self.settings.base_url,
            timeout=self.settings.timeout_s,
            transport=transport,
        )
        self.notifier = notifier or LoggingNotifier()
        self.tokens = token_store or self._default_token_store()
        self.session = SessionMonitor(
            self.notifier,
            delay_s=self.settings.session_expiry_delay_s,
            schedule=schedule,
        )
        self.dispatcher = Dispatcher(
            self.http,
            self.tokens,
            self.session,
            self.notifier,
            token_header=self.settings.token_name,
        )
        self.registry = RegistryResolver(self.dispatcher, registry_base=self.settings.registry_base)
        self.files = FileServiceApi(self.dispatcher, self.registry)

    def _default_token_store(self) -> TokenStore:
        if self.settings.token_file is not None:
            return FileTokenStore(self.settings.token_file)
        return CookieTokenStore(self.http.cookies, self.settings.token_name)

    async def aclose(self) -> None:
        await self.http.aclose()
        logger.debug("client.closed", extra={"event": "client_closed"})

    async def __aenter__(self) -> FsClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
