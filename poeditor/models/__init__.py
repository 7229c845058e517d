"""Data models for the POEditor client.

This package contains the dataclass definitions for translations, terms, projects, languages,
contributors, request options, response envelopes and configuration.
"""

from __future__ import annotations

from poeditor.models.config_models import DEFAULT_BASE_URL, Config
from poeditor.models.option_models import (
    FILE_FORMATS,
    FILTERS,
    UPDATING_VALUES,
    FileFormat,
    Filter,
    UploadFile,
    UploadOptions,
    Updating,
)
from poeditor.models.project_models import (
    Contributor,
    ContributorPermission,
    ContributorProject,
    LanguageDetails,
    ProjectDetails,
)
from poeditor.models.response_models import (
    APIResponse,
    ContributorListResult,
    CountResult,
    ExportResult,
    LanguageListResult,
    ProjectListResult,
    ProjectResult,
    ResponseStatus,
    TermCountResult,
    TermListResult,
    TranslationCountResult,
    UploadResult,
)
from poeditor.models.term_models import Term
from poeditor.models.translation_models import (
    Plural,
    Singular,
    Translation,
    TranslationContent,
    decode_content,
    encode_content,
)

__all__: list[str] = [
    "DEFAULT_BASE_URL",
    "FILE_FORMATS",
    "FILTERS",
    "UPDATING_VALUES",
    "APIResponse",
    "Config",
    "Contributor",
    "ContributorListResult",
    "ContributorPermission",
    "ContributorProject",
    "CountResult",
    "ExportResult",
    "FileFormat",
    "Filter",
    "LanguageDetails",
    "LanguageListResult",
    "Plural",
    "ProjectDetails",
    "ProjectListResult",
    "ProjectResult",
    "ResponseStatus",
    "Singular",
    "Term",
    "TermCountResult",
    "TermListResult",
    "Translation",
    "TranslationContent",
    "TranslationCountResult",
    "UploadFile",
    "UploadOptions",
    "Updating",
    "UploadResult",
    "decode_content",
    "encode_content",
]
