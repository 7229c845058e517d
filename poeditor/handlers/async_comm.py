"""Asynchronous HTTP transport for the POEditor API.

This module provides the `AsyncHttp` class, which sends form and multipart POST requests and
streams file downloads over an aiohttp session. Connection problems and timeouts are turned
into `TransportError` / `TransportTimeoutError`. Response bodies are returned as raw bytes;
interpreting them is left to the envelope codec.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, Protocol, Self

import aiohttp
from aiohttp import FormData
from aiohttp.client import ClientSession

from poeditor.errors import ExportDownloadError, TransportError, TransportTimeoutError
from poeditor.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Mapping

    from poeditor.models.option_models import UploadFile


__all__: list[str] = ["AsyncHttp", "BinarySink"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

CONNECT_TIMEOUT: Final[float] = 5.0
DOWNLOAD_CHUNK_SIZE: Final[int] = 64 * 1024


class BinarySink(Protocol):
    """Anything exported file content can be written to (an open binary file, ``io.BytesIO``, ...)."""

    def write(self, data: bytes, /) -> Any: ...


class AsyncHttp:
    """Asynchronous HTTP client used by the request dispatcher.

    The aiohttp session is created lazily on first use, so the client can be constructed outside
    a running event loop. A session passed in by the caller is used as-is and never closed here.
    """

    def __init__(self, *, session: ClientSession | None = None, total_timeout: float = 0.0) -> None:
        """Initialize the transport.

        Args:
            session (ClientSession | None): Caller-owned session to reuse.
            total_timeout (float): Total timeout per request in seconds; 0 or negative disables it.
        """
        logger.info("%s initializing", self.__class__.__name__)
        self.__session: ClientSession | None = session
        self._owns_session: bool = session is None
        self.total_timeout: float = total_timeout

    async def __aenter__(self) -> Self:
        logger.debug("%s entering context", self.__class__.__name__)
        self.initialize_session(suppress_already_log=True)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        logger.debug("%s exiting context", self.__class__.__name__)
        await self.close()

    def initialize_session(self, *, suppress_already_log: bool = False) -> None:
        """Create an owned aiohttp session if none is open.

        Must be called from within a running event loop.

        Args:
            suppress_already_log (bool): If True, do not log when the session is already initialized.
        """
        if self.__session is None or self.__session.closed:
            if not self._owns_session:
                msg = "The caller-supplied session has been closed"
                raise TransportError(msg)
            self.__session = ClientSession()
            logger.debug("%s session initialized", self.__class__.__name__)
        elif not suppress_already_log:
            logger.debug("%s session already initialized", self.__class__.__name__)

    @property
    def session(self) -> ClientSession:
        """Return the open session, creating an owned one if needed."""
        self.initialize_session(suppress_already_log=True)
        if self.__session is None:
            msg = "Session is not initialized"
            raise RuntimeError(msg)
        return self.__session

    @property
    def closed(self) -> bool:
        return self.__session is None or self.__session.closed

    async def close(self) -> None:
        """Close the session if this transport created it."""
        if self._owns_session and self.__session and not self.__session.closed:
            await self.__session.close()
            logger.info("%s session closed", self.__class__.__name__)

    def _timeout(self) -> aiohttp.ClientTimeout:
        if self.total_timeout <= 0:
            return aiohttp.ClientTimeout(total=None)
        if self.total_timeout < CONNECT_TIMEOUT:
            return aiohttp.ClientTimeout(total=self.total_timeout)
        return aiohttp.ClientTimeout(connect=CONNECT_TIMEOUT, total=self.total_timeout)

    @staticmethod
    def build_body(fields: Mapping[str, str], files: Mapping[str, UploadFile] | None = None) -> FormData | dict[str, str]:
        """Build the request body.

        Without files the fields are sent url-encoded; with at least one file everything is sent
        as multipart/form-data.

        Args:
            fields (Mapping[str, str]): Plain form fields.
            files (Mapping[str, UploadFile] | None): Files keyed by form field name.
        Returns:
            FormData | dict[str, str]: The body to pass to aiohttp as ``data``.
        """
        if not files:
            return dict(fields)

        form = FormData()
        for name, value in fields.items():
            form.add_field(name, value)
        for name, upload in files.items():
            form.add_field(
                name,
                upload.content,
                filename=upload.filename or name,
                content_type="application/octet-stream",
            )
        return form

    async def post_form(
        self,
        *,
        url: str,
        fields: Mapping[str, str],
        files: Mapping[str, UploadFile] | None = None,
    ) -> bytes:
        """Send a form POST and return the raw response body.

        The HTTP status is not checked here; the service reports failures in the body.

        Args:
            url (str): Endpoint URL.
            fields (Mapping[str, str]): Form fields.
            files (Mapping[str, UploadFile] | None): Optional file attachments.
        Returns:
            bytes: The response body, read exactly once.
        Raises:
            TransportError: On connection failures.
            TransportTimeoutError: If the request times out.
        """
        # field values are not logged; they include the API token
        logger.debug("[POST] url=%s fields=%s files=%s", url, sorted(fields), sorted(files or {}))
        try:
            async with self.session.request(
                "POST",
                url,
                data=self.build_body(fields, files),
                timeout=self._timeout(),
            ) as resp:
                body: bytes = await resp.read()
                logger.debug("[POST] status=%s length=%d", resp.status, len(body))
                return body
        except TimeoutError as err:
            logger.debug(err)
            msg = "Timeout due to a lack of response from the server."
            raise TransportTimeoutError(msg) from err
        except ConnectionResetError as err:
            logger.debug(err)
            msg = "The connection to the server has been disconnected."
            raise TransportError(msg) from err
        except aiohttp.ClientConnectorError as err:
            logger.debug(err)
            msg = "Unable to connect to the server."
            raise TransportError(msg) from err
        except aiohttp.ClientError as err:
            logger.debug(err)
            msg = "The request to the server failed."
            raise TransportError(msg) from err

    async def download(self, *, url: str, sink: BinarySink, chunk_size: int = DOWNLOAD_CHUNK_SIZE) -> int:
        """Stream a GET response body into ``sink``.

        Args:
            url (str): URL to download.
            sink (BinarySink): Destination for the bytes.
            chunk_size (int): Read size in bytes.
        Returns:
            int: Number of bytes written.
        Raises:
            ExportDownloadError: If the download fails; bytes already written stay in the sink.
        """
        logger.debug("[GET] url=%s", url)
        written: int = 0
        try:
            async with self.session.request("GET", url, timeout=self._timeout()) as resp:
                resp.raise_for_status()
                async for chunk in resp.content.iter_chunked(chunk_size):
                    sink.write(chunk)
                    written += len(chunk)
        except TimeoutError as err:
            logger.debug(err)
            msg = f"Timeout while downloading the export after {written} bytes."
            raise ExportDownloadError(msg) from err
        except aiohttp.ClientResponseError as err:
            logger.debug(err)
            msg = "Error response while downloading the export."
            raise ExportDownloadError(msg, status=err.status) from err
        except (ConnectionResetError, aiohttp.ClientError) as err:
            logger.debug(err)
            msg = f"Download of the export failed after {written} bytes."
            raise ExportDownloadError(msg) from err
        logger.debug("[GET] %d bytes written", written)
        return written
