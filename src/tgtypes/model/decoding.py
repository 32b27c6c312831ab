from functools import lru_cache
from typing import Any

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from tgtypes.util import error_codes, log
from tgtypes.util.errors import DecodeError, InternalError


@lru_cache(maxsize = 128)
def _adapter_for(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _name_of(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)


def _to_decode_error(target: Any, error: PydanticValidationError) -> DecodeError:
    error_types = {detail["type"] for detail in error.errors()}
    code = error_codes.AMBIGUOUS_VARIANT if "ambiguous_variant" in error_types else error_codes.MALFORMED_PAYLOAD
    summary = "; ".join(
        f"{'.'.join(str(part) for part in detail['loc']) or '<root>'}: {detail['msg']}"
        for detail in error.errors()[:5]
    )
    return DecodeError(f"Unable to decode {_name_of(target)}: {summary}", code)


def decode(target: Any, data: Any) -> Any:
    """
    Validates ``data`` (already parsed JSON) into ``target``.

    ``target`` can be a model class or any type expression pydantic understands,
    e.g. ``Chat``, ``list[ChatMember]`` or ``bool``.

    Raises:
        DecodeError: required fields are missing, types mismatch,
            or a polymorphic payload has no or ambiguous content.
    """
    try:
        return _adapter_for(target).validate_python(data)
    except PydanticValidationError as e:
        raise _to_decode_error(target, e) from e


def decode_json(target: Any, raw: str | bytes) -> Any:
    try:
        return _adapter_for(target).validate_json(raw)
    except PydanticValidationError as e:
        raise _to_decode_error(target, e) from e


def encode(value: BaseModel) -> dict[str, Any]:
    """JSON-ready dictionary with wire names; absent (None) fields are left out."""
    try:
        return value.model_dump(mode = "json", by_alias = True, exclude_none = True)
    except PydanticSerializationError as e:
        message = log.e(f"Failed to encode {type(value).__name__}", e)
        raise InternalError(message, error_codes.PAYLOAD_ENCODING_FAILED) from e
