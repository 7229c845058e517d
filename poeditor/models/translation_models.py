"""Models for translation values.

A translation's content is either a single string or a plural pair. The wire format carries
no tag, so decoding dispatches on the JSON shape: a string is :class:`Singular`, an object is
:class:`Plural`. Anything else is rejected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, TypeAlias

from poeditor.errors import CodecError, ValidationError
from poeditor.utils.field_utils import FieldUtils
from poeditor.utils.time_utils import ZERO_TIMESTAMP, TimeUtils

__all__: list[str] = [
    "Plural",
    "Singular",
    "Translation",
    "TranslationContent",
    "decode_content",
    "encode_content",
]


@dataclass(frozen=True)
class Singular:
    """Translation content without plural forms.

    Attributes:
        text (str): The translated string.
    """

    text: str = ""

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Plural:
    """Translation content with singular and plural forms.

    Attributes:
        one (str): Form used for a count of one.
        other (str): Form used for every other count.
    """

    one: str = ""
    other: str = ""


TranslationContent: TypeAlias = Singular | Plural


def encode_content(content: Any) -> str | dict[str, str]:
    """Convert translation content to its JSON value.

    Args:
        content (Any): A :class:`Singular` or :class:`Plural` value.

    Returns:
        str | dict[str, str]: A string for singular content, ``{"one": ..., "other": ...}`` for plural content.

    Raises:
        ValidationError: If the content is neither variant.
    """
    if isinstance(content, Singular):
        return content.text
    if isinstance(content, Plural):
        return {"one": content.one, "other": content.other}
    msg: str = f"Translation content must be Singular or Plural, got {type(content).__name__}"
    raise ValidationError(msg)


def decode_content(value: Any) -> TranslationContent:
    """Build translation content from its JSON value.

    Missing plural keys decode to empty strings; keys other than ``one`` and ``other`` are ignored.

    Raises:
        CodecError: If the value is not a string or an object of strings.
    """
    if isinstance(value, str):
        return Singular(value)
    if isinstance(value, dict):
        one: Any = value.get("one", "")
        other: Any = value.get("other", "")
        if not isinstance(one, str) or not isinstance(other, str):
            msg: str = f"Plural forms must be strings: {value!r}"
            raise CodecError(msg)
        return Plural(one=one, other=other)
    msg = f"Unrecognized translation content: {value!r}"
    raise CodecError(msg)


def _or_default(value: dict[str, Any], key: str, default: Any) -> Any:
    item: Any = value.get(key)
    return default if item is None else item


@dataclass(frozen=True)
class Translation:
    """One term's translation in one language.

    Attributes:
        content (TranslationContent): Singular or plural translated text.
        fuzzy (bool): Whether the translation is marked fuzzy.
        proofread (bool): Whether the translation has been proofread.
        updated (datetime): Last update time, truncated to whole seconds; ``ZERO_TIMESTAMP`` when unknown.
    """

    content: TranslationContent
    fuzzy: bool = False
    proofread: bool = False
    updated: datetime = field(default=ZERO_TIMESTAMP)

    def __post_init__(self) -> None:
        # the wire format has second precision and a UTC offset
        updated: datetime = self.updated.replace(microsecond=0)
        if updated.tzinfo is None:
            updated = updated.replace(tzinfo=UTC)
        object.__setattr__(self, "updated", updated)

    @property
    def is_plural(self) -> bool:
        return isinstance(self.content, Plural)

    def encode(self) -> dict[str, Any]:
        """Serialize the full translation snapshot.

        Raises:
            ValidationError: If the content is neither variant.
        """
        data: dict[str, Any] = {
            "content": encode_content(self.content),
            "fuzzy": FieldUtils.encode_flag(self.fuzzy),
            "proofread": FieldUtils.encode_flag(self.proofread),
        }
        if not TimeUtils.is_zero(self.updated):
            data["updated"] = TimeUtils.format_timestamp(self.updated)
        return data

    def to_payload(self) -> dict[str, Any]:
        """Serialize the fields accepted by translation writes."""
        return {
            "content": encode_content(self.content),
            "fuzzy": FieldUtils.encode_flag(self.fuzzy),
        }

    @classmethod
    def decode(cls, value: Any) -> Translation:
        """Build a translation from its JSON object.

        Absent or ``null`` flags and timestamps take their defaults.

        Raises:
            CodecError: If the value is not an object, has no usable content, or carries invalid flags or timestamps.
        """
        if not isinstance(value, dict):
            msg: str = f"Translation must be a JSON object, got {value!r}"
            raise CodecError(msg)
        if "content" not in value:
            msg = "Translation has no content"
            raise CodecError(msg)
        return cls(
            content=decode_content(value["content"]),
            fuzzy=FieldUtils.parse_flag(_or_default(value, "fuzzy", 0)),
            proofread=FieldUtils.parse_flag(_or_default(value, "proofread", 0)),
            updated=TimeUtils.parse_timestamp(_or_default(value, "updated", "")),
        )
