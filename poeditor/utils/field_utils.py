"""dataclasses-json field helpers for the loosely typed values POEditor returns.

The service sends booleans as ``0``/``1`` (sometimes as strings), timestamps as strings that
may be empty, and tag lists that may be ``null``. These helpers attach decoders and encoders
so the model classes stay declarative.
"""

from __future__ import annotations

from dataclasses import MISSING, field, fields
from typing import Any

from dataclasses_json import config

from poeditor.errors import CodecError
from poeditor.utils.time_utils import ZERO_TIMESTAMP, TimeUtils

__all__: list[str] = ["FieldUtils", "NullDefaultsMixin", "flag_field", "text_tuple_field", "timestamp_field"]


class FieldUtils:
    """Decoders and encoders used by the model field helpers."""

    @staticmethod
    def parse_flag(value: Any) -> bool:
        """Decode a 0/1 style flag.

        Raises:
            CodecError: If the value is not a bool, an int, or a numeric/boolean string.
        """
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return value != 0
        if isinstance(value, str):
            lowered: str = value.strip().lower()
            if lowered in ("1", "true"):
                return True
            if lowered in ("", "0", "false"):
                return False
        msg: str = f"Invalid flag value: {value!r}"
        raise CodecError(msg)

    @staticmethod
    def encode_flag(value: bool) -> int:  # noqa: FBT001
        return 1 if value else 0

    @staticmethod
    def parse_text_tuple(value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            # single tag sent as a bare string
            return (value,)
        if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
            return tuple(value)
        msg: str = f"Expected a list of strings, got {value!r}"
        raise CodecError(msg)

    @staticmethod
    def fill_null_defaults(instance: Any) -> None:
        """Set every None field of a (possibly frozen) dataclass instance to its default.

        Fields whose default is None are left alone.

        Raises:
            CodecError: If a field without a default is None.
        """
        for item in fields(instance):
            if getattr(instance, item.name) is not None:
                continue
            value: Any
            if item.default is not MISSING:
                if item.default is None:
                    continue
                value = item.default
            elif item.default_factory is not MISSING:
                value = item.default_factory()
            else:
                msg: str = f"'{item.name}' of {type(instance).__name__} must not be null"
                raise CodecError(msg)
            object.__setattr__(instance, item.name, value)


def timestamp_field() -> Any:
    return field(
        default=ZERO_TIMESTAMP,
        metadata=config(decoder=TimeUtils.parse_timestamp, encoder=TimeUtils.format_timestamp),
    )


def flag_field(*, default: bool = False) -> Any:
    return field(default=default, metadata=config(decoder=FieldUtils.parse_flag, encoder=FieldUtils.encode_flag))


def text_tuple_field() -> Any:
    return field(default=(), metadata=config(decoder=FieldUtils.parse_text_tuple, encoder=list))


class NullDefaultsMixin:
    """Replaces JSON ``null`` values with the field defaults after decoding.

    dataclasses-json stores ``null`` as None without calling the field decoder, so a model
    mixing this in never carries None in a field whose default is not None.

    Raises:
        CodecError: If a field without a default is None.
    """

    def __post_init__(self) -> None:
        FieldUtils.fill_null_defaults(self)
