from typing import Any, Callable, Iterable

from pydantic_core import PydanticCustomError

UNKNOWN_TAG = "unknown"


def tag_resolver(field: str, known_tags: Iterable[str], fallback: str = UNKNOWN_TAG) -> Callable[[Any], str | None]:
    """
    Builds a pydantic callable discriminator that reads the tag from ``field``.

    Known tag values select their own variant, any other value selects the ``fallback``
    (catch-all) variant. A missing tag returns ``None``, which pydantic reports as a
    validation error, so payloads without a discriminant never decode.
    """
    known = frozenset(known_tags)

    def resolve(value: Any) -> str | None:
        tag = value.get(field) if isinstance(value, dict) else getattr(value, field, None)
        if tag is None:
            return None
        # non-string tags fall through to the catch-all, whose own field rejects them
        if not isinstance(tag, str):
            return fallback
        return tag if tag in known else fallback

    return resolve


def presence_resolver(keys: Iterable[str]) -> Callable[[Any], str | None]:
    """Discriminator for untagged unions: the first of ``keys`` that holds a value names the variant."""
    ordered = tuple(keys)

    def resolve(value: Any) -> str | None:
        for key in ordered:
            present = value.get(key) if isinstance(value, dict) else getattr(value, key, None)
            if present is not None:
                return key
        return None

    return resolve


def missing_variant_error(entity: str) -> PydanticCustomError:
    return PydanticCustomError(
        "missing_variant",
        "{entity} payload carries no recognizable content",
        {"entity": entity},
    )


def ambiguous_variant_error(entity: str, keys: list[str]) -> PydanticCustomError:
    return PydanticCustomError(
        "ambiguous_variant",
        "{entity} payload carries more than one content: {keys}",
        {"entity": entity, "keys": ", ".join(keys)},
    )
