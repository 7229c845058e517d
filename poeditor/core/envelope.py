"""Response envelope decoding and error classification.

Decoding is lenient about ``status`` and ``message`` but strict about ``code``: the code decides
whether the call succeeded, so a code that is not a non-negative integer is a `CodecError`.
"""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, Final, TypeVar

from marshmallow.exceptions import ValidationError as SchemaValidationError

from poeditor.errors import APIError, CodecError
from poeditor.models.response_models import APIResponse, ResponseStatus
from poeditor.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from dataclasses_json import DataClassJsonMixin

__all__: list[str] = ["SUCCESS_CODE_RANGE", "classify_response", "decode_envelope", "decode_result", "parse_code"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

T = TypeVar("T", bound="DataClassJsonMixin")

# Codes below 200 + SUCCESS_CODE_RANGE are successes, so 299 passes and 300 fails.
# The bound is one-sided: codes below 200 pass too.
SUCCESS_CODE_RANGE: Final[int] = 100


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        # integral floats such as 200.0 format without the fraction
        return str(int(value))
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def decode_envelope(raw: bytes) -> APIResponse:
    """Decode a response body into an envelope.

    Args:
        raw (bytes): The response body.
    Returns:
        APIResponse: Status fields and the undecoded ``result`` value.
    Raises:
        CodecError: If the body is not a JSON object.
    """
    try:
        body: Any = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as err:
        msg: str = f"Response body is not valid JSON: {err}"
        raise CodecError(msg) from err
    if not isinstance(body, dict):
        msg = f"Response body must be a JSON object, got {type(body).__name__}"
        raise CodecError(msg)

    response: Any = body.get("response")
    if not isinstance(response, dict):
        logger.debug("Envelope has no usable 'response' object: %r", response)
        response = {}
    status = ResponseStatus(
        status=_text(response.get("status")),
        code=_text(response.get("code")),
        message=_text(response.get("message")),
    )
    return APIResponse(response=status, result=body.get("result"))


def parse_code(code: str) -> int:
    """Interpret an envelope code as a non-negative integer.

    Only ASCII digits are accepted; signs, underscores and other Unicode digits are rejected.

    Raises:
        CodecError: If the code is not a non-negative integer.
    """
    digits: str = code.strip()
    if not (digits.isascii() and digits.isdecimal()):
        msg: str = f"Invalid response code '{code}'"
        raise CodecError(msg)
    return int(digits)


def classify_response(response: ResponseStatus) -> None:
    """Raise if the envelope reports a failure.

    Raises:
        CodecError: If the code cannot be parsed.
        APIError: If the code is ``SUCCESS_CODE_RANGE`` or more above 200.
    """
    code: int = parse_code(response.code)
    if code - HTTPStatus.OK >= SUCCESS_CODE_RANGE:
        logger.debug("API failure: %s %s: %s", response.status, response.code, response.message)
        raise APIError(response.status, response.code, response.message)


def decode_result(result: Any, result_type: type[T]) -> T:
    """Populate ``result_type`` from an envelope's ``result`` value.

    Raises:
        CodecError: If the value does not fit the result model.
    """
    if not isinstance(result, dict):
        msg: str = f"Expected a JSON object for {result_type.__name__}, got {result!r}"
        raise CodecError(msg)
    try:
        # no infer_missing: an absent required field must fail instead of becoming None
        return result_type.from_dict(result)
    except CodecError:
        raise
    except (SchemaValidationError, TypeError, KeyError, ValueError, AttributeError) as err:
        msg = f"The result does not match {result_type.__name__}: {err}"
        logger.error(msg)
        raise CodecError(msg) from err
