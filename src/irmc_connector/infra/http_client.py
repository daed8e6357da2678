import asyncio
from pathlib import Path
from typing import Optional

import httpx

from irmc_connector.config.settings import Settings
from irmc_connector.domain.entities.connection import ConnectionConfig
from irmc_connector.domain.exception import (
    FileAccessError,
    HttpStatusError,
    MissingLocationHeader,
    TransportError,
)
from irmc_connector.domain.interfaces.i_irmc_api import IIrmcApi
from irmc_connector.utils.logger import setup_logger
from irmc_connector.utils.token import create_basic_token

logger = setup_logger(__name__)


class IrmcApiConnector(IIrmcApi):
    """
    Async connector for the iRMC REST (Redfish) API.

    Every request carries ``Authorization: Basic <token>`` and
    ``Accept: application/json``. The token is expected to be already
    base64 encoded; use ``from_credentials`` to build one from a username
    and password.
    Headers are fixed at construction and never change afterwards.
    """

    def __init__(
        self,
        token: str,
        timeout: float = Settings.Server.TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = ConnectionConfig(token=token, timeout=timeout)
        self.session = httpx.AsyncClient(
            headers=self.config.headers(),
            timeout=self.config.timeout,
            follow_redirects=Settings.Server.FOLLOW_REDIRECTS,
            transport=transport,
        )

    @classmethod
    def from_credentials(
        cls,
        username: str,
        password: str,
        timeout: float = Settings.Server.TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "IrmcApiConnector":
        return cls(
            create_basic_token(username, password),
            timeout=timeout,
            transport=transport,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(timeout={self.config.timeout})"

    async def __aenter__(self) -> "IrmcApiConnector":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def get(self, url: str) -> str:
        logger.debug(f"GET {url}")
        resp = await self._send("GET", url)
        return resp.text

    async def post_file(self, url: str, filepath: str) -> str:
        """
        Upload ``filepath`` as the single multipart part ``data`` and return
        the ``Location`` header of the response (the queued task).

        The whole file is read into memory before sending.
        """
        path = Path(filepath)
        try:
            # read in a worker thread, not on the event loop
            content = await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            raise FileAccessError(str(filepath), e.strerror or str(e)) from e

        files = {
            Settings.Upload.FIELD_NAME: (
                path.name,
                content,
                Settings.Upload.CONTENT_TYPE,
            )
        }
        logger.info(f"POST {url} uploading '{path.name}' ({len(content)} bytes)")

        # timeout is scoped to this request, the client default stays untouched
        resp = await self._send(
            "POST", url, files=files, timeout=Settings.Server.UPLOAD_TIMEOUT
        )

        location = resp.headers.get("Location", "").strip()
        if not location:
            raise MissingLocationHeader(url, resp.status_code)
        return location

    async def post_action(self, url: str) -> str:
        logger.debug(f"POST {url} (no body)")
        resp = await self._send("POST", url)
        return resp.text

    async def aclose(self) -> None:
        await self.session.aclose()

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            resp = await self.session.request(method, url, **kwargs)
        except httpx.RequestError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not resp.is_success:
            raise HttpStatusError(resp.status_code, resp.reason_phrase, url)

        logger.debug(f"{method} {url} -> {resp.status_code}")
        return resp
