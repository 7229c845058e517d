from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Final

from poeditor.errors import CodecError

__all__: list[str] = ["TIMESTAMP_FORMAT", "ZERO_TIMESTAMP", "TimeUtils"]

# e.g. "2021-06-15T10:00:00+0000"
TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S%z"

# Stands in for fields the service sends as "" (never updated, never created).
ZERO_TIMESTAMP: Final[datetime] = datetime.min.replace(tzinfo=UTC)


class TimeUtils:
    """Conversion between POEditor timestamp strings and aware datetimes."""

    @staticmethod
    def parse_timestamp(value: Any) -> datetime:
        """Parse a POEditor timestamp.

        Args:
            value (Any): Raw JSON value, expected to be a string such as ``"2021-06-15T10:00:00+0000"``.

        Returns:
            datetime: Timezone-aware datetime, or ``ZERO_TIMESTAMP`` for an empty string.

        Raises:
            CodecError: If the value is not a string or does not match the timestamp format.
        """
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            msg: str = f"Timestamp must be a string, got {type(value).__name__}"
            raise CodecError(msg)
        if value == "":
            return ZERO_TIMESTAMP
        try:
            return datetime.strptime(value, TIMESTAMP_FORMAT)
        except ValueError as err:
            msg = f"Invalid timestamp '{value}'"
            raise CodecError(msg) from err

    @staticmethod
    def format_timestamp(value: datetime) -> str:
        """Format a datetime the way the service sends it; the zero timestamp becomes ``""``."""
        if value == ZERO_TIMESTAMP:
            return ""
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.strftime(TIMESTAMP_FORMAT)

    @staticmethod
    def is_zero(value: datetime) -> bool:
        return value == ZERO_TIMESTAMP
