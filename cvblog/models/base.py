"""Base model class for content records."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


class RecordModel(BaseModel):
    """Base model for immutable content records."""

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        populate_by_name=True,
    )


def to_iso(value: datetime) -> str:
    """Render a datetime as an ISO-8601 UTC string with a trailing Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
