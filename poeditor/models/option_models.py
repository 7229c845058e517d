"""Request option models and the keyword sets the service accepts.

The keyword values are sent verbatim on the wire.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO, Final, Literal, TypeAlias

__all__: list[str] = [
    "FILE_FORMATS",
    "FILTERS",
    "UPDATING_VALUES",
    "FileFormat",
    "Filter",
    "UploadFile",
    "UploadOptions",
    "Updating",
]

FileFormat: TypeAlias = Literal[
    "po",
    "pot",
    "mo",
    "xls",
    "csv",
    "resw",
    "resx",
    "android_strings",
    "apple_strings",
    "xliff",
    "properties",
    "key_value_json",
    "json",
    "xmb",
    "xtb",
]

Filter: TypeAlias = Literal[
    "translated",
    "untranslated",
    "fuzzy",
    "not_fuzzy",
    "automatic",
    "not_automatic",
    "proofread",
    "not_proofread",
]

Updating: TypeAlias = Literal["terms", "terms_translations", "translations"]

FILE_FORMATS: Final[tuple[str, ...]] = (
    "po",
    "pot",
    "mo",
    "xls",
    "csv",
    "resw",
    "resx",
    "android_strings",
    "apple_strings",
    "xliff",
    "properties",
    "key_value_json",
    "json",
    "xmb",
    "xtb",
)

FILTERS: Final[tuple[str, ...]] = (
    "translated",
    "untranslated",
    "fuzzy",
    "not_fuzzy",
    "automatic",
    "not_automatic",
    "proofread",
    "not_proofread",
)

UPDATING_VALUES: Final[tuple[str, ...]] = ("terms", "terms_translations", "translations")


@dataclass(frozen=True)
class UploadFile:
    """File content attached to a multipart request.

    Attributes:
        content (bytes | IO[bytes]): Raw bytes or a binary file object.
        filename (str): Name reported to the server; the service infers the format from its extension.
    """

    content: bytes | IO[bytes]
    filename: str = "file"


@dataclass(frozen=True)
class UploadOptions:
    """Options for ``projects/upload``.

    Attributes:
        updating (Updating | str): What the upload updates.
        language (str): Language code; required unless ``updating`` is ``"terms"``.
        overwrite (bool): Overwrite existing translations.
        sync_terms (bool): Delete terms that are not in the uploaded file.
        tags (tuple[str, ...]): Tags added to the uploaded terms.
        read_from_source (bool): Read translations from the source field (xliff).
        fuzzy_trigger (bool): Mark translations in other languages fuzzy when a term changes.
    """

    updating: Updating | str = "terms"
    language: str = ""
    overwrite: bool = False
    sync_terms: bool = False
    tags: tuple[str, ...] = field(default=())
    read_from_source: bool = False
    fuzzy_trigger: bool = False
