"""
Кодек flash-сообщений.

Значение куки - это JSON вида {"_": <payload>}. Конверт с одним ключом позволяет
одинаково хранить строки, числа, списки и модели.
"""
import json
from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from cookie_flash.errors import DecodeError, EncodeError

T = TypeVar("T")

ENVELOPE_KEY = "_"


class Envelope(BaseModel, Generic[T]):
    # strict: {"_": 1} не должен превращаться в строку "1" и наоборот
    model_config = ConfigDict(populate_by_name=True, strict=True)

    value: T = Field(alias=ENVELOPE_KEY)


@lru_cache(maxsize=128)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def encode(value: Any, type_: Any = Any) -> str:
    """Сериализует значение в компактный JSON-конверт для куки."""
    try:
        payload = _adapter(type_).dump_python(value, mode="json")
        # ensure_ascii: кириллица уходит как \uXXXX, заголовок остается latin-1
        raw = json.dumps({ENVELOPE_KEY: payload}, separators=(",", ":"), allow_nan=False)
        # ";" в JSON бывает только внутри строк, а в куке он режет значение
        return raw.replace(";", "\\u003b")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise EncodeError(f"Cannot serialize flash message of type {type(value).__name__}: {e}") from e


def decode(raw: str, type_: Any = Any) -> Any:
    """Достает значение из конверта. Любое расхождение с форматом - DecodeError."""
    try:
        envelope = Envelope[type_].model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"Malformed flash payload: {e.error_count()} error(s), first: {e.errors()[0]['msg']}") from e
    return envelope.value
