from __future__ import annotations

import pytest

from poeditor.errors import CodecError
from poeditor.utils.field_utils import FieldUtils


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, True),
        (0, False),
        (True, True),
        (False, False),
        ("1", True),
        ("0", False),
        ("true", True),
        ("False", False),
        ("", False),
    ],
)
def test_parse_flag(value: object, expected: bool) -> None:  # noqa: FBT001
    assert FieldUtils.parse_flag(value) is expected


@pytest.mark.parametrize("value", ["yes", "2x", None, 1.5, []])
def test_parse_flag_rejects_unknown_values(value: object) -> None:
    with pytest.raises(CodecError):
        FieldUtils.parse_flag(value)


def test_encode_flag() -> None:
    assert FieldUtils.encode_flag(True) == 1  # noqa: FBT003
    assert FieldUtils.encode_flag(False) == 0  # noqa: FBT003


def test_parse_text_tuple() -> None:
    assert FieldUtils.parse_text_tuple(None) == ()
    assert FieldUtils.parse_text_tuple("ui") == ("ui",)
    assert FieldUtils.parse_text_tuple(["ui", "menu"]) == ("ui", "menu")


@pytest.mark.parametrize("value", [1, {"a": "b"}, ["ui", 2]])
def test_parse_text_tuple_rejects_other_shapes(value: object) -> None:
    with pytest.raises(CodecError):
        FieldUtils.parse_text_tuple(value)
