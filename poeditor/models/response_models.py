"""Models for the response envelope and the per-endpoint result payloads.

Every response has the shape ``{"response": {"status", "code", "message"}, "result": ...}``.
The result classes below describe the ``result`` slot of each endpoint and are decoded
generically by :func:`poeditor.core.envelope.decode_result`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dataclasses_json import DataClassJsonMixin, dataclass_json

from poeditor.models.project_models import Contributor, LanguageDetails, ProjectDetails
from poeditor.models.term_models import Term
from poeditor.utils.field_utils import NullDefaultsMixin

__all__: list[str] = [
    "APIResponse",
    "ContributorListResult",
    "CountResult",
    "ExportResult",
    "LanguageListResult",
    "ProjectListResult",
    "ProjectResult",
    "ResponseStatus",
    "TermCountResult",
    "TermListResult",
    "TranslationCountResult",
    "UploadResult",
]


@dataclass(frozen=True)
class ResponseStatus:
    """The ``response`` part of the envelope.

    Attributes:
        status (str): ``"success"`` or ``"fail"``.
        code (str): Numeric code as text, e.g. ``"200"``.
        message (str): Message from the service.
    """

    status: str = ""
    code: str = ""
    message: str = ""


@dataclass(frozen=True)
class APIResponse:
    """A decoded envelope whose ``result`` has not been interpreted yet."""

    response: ResponseStatus = field(default_factory=ResponseStatus)
    result: Any = None


@dataclass_json
@dataclass(frozen=True)
class CountResult(NullDefaultsMixin, DataClassJsonMixin):
    """Counters reported by bulk writes; counters an endpoint does not report stay 0."""

    parsed: int = 0
    added: int = 0
    updated: int = 0
    deleted: int = 0


@dataclass_json
@dataclass(frozen=True)
class TermCountResult(NullDefaultsMixin, DataClassJsonMixin):
    terms: CountResult = field(default_factory=CountResult)


@dataclass_json
@dataclass(frozen=True)
class TranslationCountResult(NullDefaultsMixin, DataClassJsonMixin):
    translations: CountResult = field(default_factory=CountResult)


@dataclass_json
@dataclass(frozen=True)
class UploadResult(NullDefaultsMixin, DataClassJsonMixin):
    """Counters for the terms and translations parsed from an uploaded file."""

    terms: CountResult = field(default_factory=CountResult)
    translations: CountResult = field(default_factory=CountResult)


@dataclass_json
@dataclass(frozen=True)
class ExportResult(NullDefaultsMixin, DataClassJsonMixin):
    """Transient download URL of an exported file."""

    url: str


@dataclass_json
@dataclass(frozen=True)
class ProjectResult(NullDefaultsMixin, DataClassJsonMixin):
    project: ProjectDetails


@dataclass_json
@dataclass(frozen=True)
class ProjectListResult(NullDefaultsMixin, DataClassJsonMixin):
    projects: list[ProjectDetails] = field(default_factory=list)


@dataclass_json
@dataclass(frozen=True)
class LanguageListResult(NullDefaultsMixin, DataClassJsonMixin):
    languages: list[LanguageDetails] = field(default_factory=list)


@dataclass_json
@dataclass(frozen=True)
class TermListResult(NullDefaultsMixin, DataClassJsonMixin):
    terms: list[Term] = field(default_factory=list)


@dataclass_json
@dataclass(frozen=True)
class ContributorListResult(NullDefaultsMixin, DataClassJsonMixin):
    contributors: list[Contributor] = field(default_factory=list)
