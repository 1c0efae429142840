# schemas/common.py
import datetime as dt
from typing import Annotated, Any

from pydantic import AfterValidator, AliasGenerator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


# =====================================================================
# DATE HELPERS
# =====================================================================

def today() -> dt.date:
    """Current UTC calendar day."""
    return dt.datetime.now(dt.timezone.utc).date()


def normalize_day(value: Any) -> Any:
    """
    Collapse a date or ISO-8601 timestamp to its UTC calendar day.

    "2024-01-01" passes through untouched; "2024-01-01T23:30:00-02:00"
    becomes 2024-01-02.
    """
    if isinstance(value, str) and len(value) > 10:
        value = dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, dt.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(dt.timezone.utc)
        return value.date()
    return value


CalendarDay = Annotated[dt.date, BeforeValidator(normalize_day)]


def as_utc(value: dt.datetime) -> dt.datetime:
    """Stored timestamps are UTC; SQLite hands them back without an offset."""
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)


UTCDateTime = Annotated[dt.datetime, AfterValidator(as_utc)]


# =====================================================================
# BASE SCHEMAS
# =====================================================================

class APIModel(BaseModel):
    """Read schema base: built from ORM rows, serialized with camelCase keys."""
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )


class MessageResponse(BaseModel):
    """Generic message response."""
    message: str
