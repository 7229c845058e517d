"""Asynchronous client for the POEditor translation management API.

Typical use::

    from poeditor import POEditor, Plural, Singular, Term, Translation

    async with POEditor("token") as poe:
        project = poe.project(42)
        await project.add_terms([Term("hello")])
        await project.language("fr").add_translations(
            [Term("hello", translation=Translation(Singular("bonjour")))]
        )
"""

from poeditor.config import ConfigLoader
from poeditor.core import VERSION, Language, POEditor, Project
from poeditor.errors import (
    APIError,
    CodecError,
    ExportDownloadError,
    POEditorError,
    TransportError,
    TransportTimeoutError,
    ValidationError,
)
from poeditor.models import (
    FILE_FORMATS,
    FILTERS,
    UPDATING_VALUES,
    Contributor,
    CountResult,
    ExportResult,
    LanguageDetails,
    Plural,
    ProjectDetails,
    Singular,
    Term,
    Translation,
    UploadFile,
    UploadOptions,
    UploadResult,
)
from poeditor.utils import ZERO_TIMESTAMP, LoggerUtils

__version__: str = VERSION

__all__: list[str] = [
    "FILE_FORMATS",
    "FILTERS",
    "UPDATING_VALUES",
    "ZERO_TIMESTAMP",
    "APIError",
    "CodecError",
    "ConfigLoader",
    "Contributor",
    "CountResult",
    "ExportDownloadError",
    "ExportResult",
    "Language",
    "LanguageDetails",
    "LoggerUtils",
    "POEditor",
    "POEditorError",
    "Plural",
    "Project",
    "ProjectDetails",
    "Singular",
    "Term",
    "Translation",
    "TransportError",
    "TransportTimeoutError",
    "UploadFile",
    "UploadOptions",
    "UploadResult",
    "ValidationError",
]
