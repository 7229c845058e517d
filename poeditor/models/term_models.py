"""Models for project terms.

A term is identified within its project by the ``(term, context)`` pair. When terms are listed
for a language, each one carries that language's :class:`Translation`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from dataclasses_json import DataClassJsonMixin, config, dataclass_json

from poeditor.errors import ValidationError
from poeditor.models.translation_models import Translation
from poeditor.utils.field_utils import NullDefaultsMixin, text_tuple_field, timestamp_field

__all__: list[str] = ["Term"]


@dataclass_json
@dataclass(frozen=True)
class Term(NullDefaultsMixin, DataClassJsonMixin):
    """A translatable phrase and its metadata.

    Attributes:
        term (str): Source text.
        context (str): Disambiguating context; part of the term key.
        plural (str): Plural form of the source text.
        reference (str): Free-form reference (file, line, ...).
        comment (str): Note for translators.
        tags (tuple[str, ...]): Tags attached to the term.
        created (datetime): Creation time.
        updated (datetime): Last update time.
        translation (Translation | None): Translation in the listed language, if any.
    """

    term: str
    context: str = ""
    plural: str = ""
    reference: str = ""
    comment: str = ""
    tags: tuple[str, ...] = text_tuple_field()
    created: datetime = timestamp_field()
    updated: datetime = timestamp_field()
    translation: Translation | None = field(default=None, metadata=config(decoder=Translation.decode))

    @property
    def key(self) -> tuple[str, str]:
        return (self.term, self.context)

    def to_key_payload(self) -> dict[str, Any]:
        """Serialize only the fields that identify the term."""
        data: dict[str, Any] = {"term": self.term}
        if self.context:
            data["context"] = self.context
        return data

    def to_payload(self) -> dict[str, Any]:
        """Serialize the term for term writes, omitting empty fields."""
        data: dict[str, Any] = self.to_key_payload()
        for name in ("reference", "plural", "comment"):
            value: str = getattr(self, name)
            if value:
                data[name] = value
        if self.tags:
            data["tags"] = list(self.tags)
        return data

    def to_comment_payload(self) -> dict[str, Any]:
        if not self.comment:
            msg: str = f"Term {self.key!r} has no comment to add"
            raise ValidationError(msg)
        return {**self.to_key_payload(), "comment": self.comment}

    def to_translation_payload(self) -> dict[str, Any]:
        """Serialize the term key together with its translation.

        Raises:
            ValidationError: If the term carries no translation or the content shape is unrecognized.
        """
        if self.translation is None:
            msg: str = f"Term {self.key!r} has no translation"
            raise ValidationError(msg)
        return {**self.to_key_payload(), "translation": self.translation.to_payload()}
