"""Shared decoding helpers.

Every response body goes through two steps: ``parse_json`` turns raw bytes
into a generic tree, then ``validate_model`` checks that tree against a
pydantic model. Pydantic's ``ValidationError`` never leaks out of this
module; it is translated into the ``DecodeError`` taxonomy with the dotted
path of the offending field.
"""

import json
import logging
from typing import Any, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from rango_client.errors import DecodeError, MalformedJson, MissingField, TypeMismatch

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

RawPayload = Union[bytes, bytearray, str]

# pydantic error type -> human readable expected type
_EXPECTED_TYPES = {
    "string_type": "string",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "float_type": "number",
    "float_parsing": "number",
    "list_type": "array",
    "tuple_type": "array",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
}


def join_path(base: str, segment: Union[str, int]) -> str:
    """Append a field name or list index to a dotted path."""
    if isinstance(segment, int):
        return f"{base}[{segment}]" if base else f"[{segment}]"
    return f"{base}.{segment}" if base else str(segment)


def parse_json(payload: RawPayload) -> Any:
    """Parse raw bytes into an untyped JSON tree."""
    try:
        return json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedJson(str(e)) from e
    except TypeError as e:
        raise MalformedJson(f"unsupported payload type {type(payload).__name__}") from e


def ensure_object(value: Any, path: str) -> dict:
    """Require a JSON object at ``path``."""
    if not isinstance(value, dict):
        raise TypeMismatch(path or "$", "object", value)
    return value


def translate_validation_error(error: ValidationError, base_path: str = "") -> DecodeError:
    """Convert the first pydantic error into a ``DecodeError``."""
    first = error.errors()[0]
    path = base_path
    for segment in first.get("loc", ()):
        path = join_path(path, segment)
    path = path or "$"

    error_type = first.get("type", "")
    if error_type == "missing":
        return MissingField(path)

    ctx = first.get("ctx") or {}
    expected = _EXPECTED_TYPES.get(error_type) or ctx.get("expected") or first.get("msg", error_type)
    return TypeMismatch(path, expected, first.get("input"))


def validate_model(model: Type[M], data: Any, path: str = "") -> M:
    """Validate a generic tree against ``model``."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        decode_error = translate_validation_error(e, path)
        logger.debug(f"{model.__name__} rejected at {decode_error.path}: {decode_error}")
        raise decode_error from e


def decode_model(model: Type[M], payload: RawPayload) -> M:
    """Parse and validate a complete response body."""
    data = parse_json(payload)
    ensure_object(data, "$")
    return validate_model(model, data)


def dump_wire(model: BaseModel) -> dict:
    """Dump a model in wire form: camelCase keys, absent optionals dropped."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)
