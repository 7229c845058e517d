"""Utility modules for the POEditor client.

This package provides logging setup, timestamp conversion and dataclasses-json field helpers.
"""

from poeditor.utils.field_utils import FieldUtils, NullDefaultsMixin, flag_field, text_tuple_field, timestamp_field
from poeditor.utils.logger_utils import LoggerUtils, LogLevel
from poeditor.utils.time_utils import TIMESTAMP_FORMAT, ZERO_TIMESTAMP, TimeUtils

__all__: list[str] = [
    "TIMESTAMP_FORMAT",
    "ZERO_TIMESTAMP",
    "FieldUtils",
    "LogLevel",
    "LoggerUtils",
    "NullDefaultsMixin",
    "TimeUtils",
    "flag_field",
    "text_tuple_field",
    "timestamp_field",
]
