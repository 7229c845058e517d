"""Request dispatching: identity fields, transport, envelope, classification.

Every endpoint call goes through :meth:`RequestDispatcher.dispatch`. Callers pass only the
fields specific to the endpoint; the identity of the calling handle (token, project id,
language code) is merged in last, so identity fields always win over caller fields of the
same name.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, TypeVar, overload

from poeditor.core.envelope import classify_response, decode_envelope, decode_result
from poeditor.models.config_models import DEFAULT_BASE_URL
from poeditor.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable, Mapping

    from dataclasses_json import DataClassJsonMixin

    from poeditor.handlers.async_comm import AsyncHttp
    from poeditor.models.option_models import UploadFile
    from poeditor.models.response_models import APIResponse

__all__: list[str] = ["Identity", "RequestDispatcher", "encode_json_field", "merge_identity"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

T = TypeVar("T", bound="DataClassJsonMixin")


def encode_json_field(value: Any) -> str:
    """Encode a value sent as a JSON string inside a form field (``data``, ``tags``, ``filters``)."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


@dataclass(frozen=True)
class Identity:
    """Identity fields of a handle.

    Attributes:
        api_token (str): API token, sent as ``api_token`` on every call.
        project_id (int | None): Project id, sent as ``id`` for project-scoped calls.
        language (str | None): Language code, sent as ``language`` for language-scoped calls.
    """

    api_token: str
    project_id: int | None = None
    language: str | None = None

    def for_project(self, project_id: int) -> Identity:
        return replace(self, project_id=project_id, language=None)

    def for_language(self, language: str) -> Identity:
        return replace(self, language=language)

    def fields(self) -> dict[str, str]:
        values: dict[str, str] = {"api_token": self.api_token}
        if self.project_id is not None:
            values["id"] = str(self.project_id)
        if self.language is not None:
            values["language"] = self.language
        return values

    def __repr__(self) -> str:
        return f"Identity(api_token='***', project_id={self.project_id!r}, language={self.language!r})"


def merge_identity(fields: Mapping[str, str] | None, identity: Identity) -> dict[str, str]:
    """Merge caller fields with identity fields; identity fields take precedence.

    Args:
        fields (Mapping[str, str] | None): Endpoint-specific form fields.
        identity (Identity): Identity of the calling handle.
    Returns:
        dict[str, str]: A new mapping; ``fields`` is not modified.
    """
    merged: dict[str, str] = dict(fields or {})
    for name, value in identity.fields().items():
        if name in merged and merged[name] != value:
            logger.warning("Field '%s' is set by the client and overrides the supplied value", name)
        merged[name] = value
    return merged


class RequestDispatcher:
    """Sends endpoint requests and turns the responses into typed results.

    Args:
        http (AsyncHttp): Transport used for the requests.
        base_url (str): API base URL; endpoint paths are appended to it.
        dump_sink (Callable[[str], None] | None): Receives each raw response body before decoding.
            None disables dumping.
    """

    def __init__(
        self,
        http: AsyncHttp,
        *,
        base_url: str = DEFAULT_BASE_URL,
        dump_sink: Callable[[str], None] | None = None,
    ) -> None:
        self.http: AsyncHttp = http
        self.base_url: str = base_url.rstrip("/")
        self.dump_sink: Callable[[str], None] | None = dump_sink

    @overload
    async def dispatch(
        self,
        endpoint: str,
        identity: Identity,
        fields: Mapping[str, str] | None = ...,
        files: Mapping[str, UploadFile] | None = ...,
        *,
        result_type: type[T],
    ) -> T: ...

    @overload
    async def dispatch(
        self,
        endpoint: str,
        identity: Identity,
        fields: Mapping[str, str] | None = ...,
        files: Mapping[str, UploadFile] | None = ...,
        *,
        result_type: None = None,
    ) -> None: ...

    async def dispatch(
        self,
        endpoint: str,
        identity: Identity,
        fields: Mapping[str, str] | None = None,
        files: Mapping[str, UploadFile] | None = None,
        *,
        result_type: type[T] | None = None,
    ) -> T | None:
        """Send one request and decode its result.

        Args:
            endpoint (str): Endpoint path such as ``"/projects/view"``.
            identity (Identity): Identity fields merged into the request.
            fields (Mapping[str, str] | None): Endpoint-specific form fields.
            files (Mapping[str, UploadFile] | None): File attachments; their presence selects multipart encoding.
            result_type (type[T] | None): Model for the ``result`` slot, or None to ignore it.
        Returns:
            T | None: The decoded result, or None when ``result_type`` is None.
        Raises:
            TransportError: If the request could not be completed.
            CodecError: If the response cannot be decoded.
            APIError: If the service reports a failure.
        """
        logger.info("'%s'", endpoint)
        merged: dict[str, str] = merge_identity(fields, identity)
        raw: bytes = await self.http.post_form(url=f"{self.base_url}{endpoint}", fields=merged, files=files)
        if self.dump_sink is not None:
            self.dump_sink(raw.decode("utf-8", errors="replace"))

        envelope: APIResponse = decode_envelope(raw)
        classify_response(envelope.response)
        if result_type is None:
            return None
        return decode_result(envelope.result, result_type)
