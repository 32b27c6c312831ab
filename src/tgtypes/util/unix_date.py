from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, PlainSerializer


def normalize_utc(value: datetime) -> datetime:
    """Telegram dates are unix seconds: drop sub-second precision and pin the zone to UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo = timezone.utc)
    return value.astimezone(timezone.utc).replace(microsecond = 0)


def to_unix_seconds(value: datetime) -> int:
    return int(value.timestamp())


def _zero_as_unset(value: Any) -> Any:
    # 0 is "forever" / "never" in the Bot API
    return None if value == 0 else value


UnixDateTime = Annotated[
    datetime,
    AfterValidator(normalize_utc),
    PlainSerializer(to_unix_seconds, return_type = int, when_used = "json"),
]

OptionalUnixDateTime = Annotated[UnixDateTime | None, BeforeValidator(_zero_as_unset)]
