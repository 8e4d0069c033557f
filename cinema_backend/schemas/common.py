from datetime import datetime, timezone
from typing import Annotated
from pydantic import AfterValidator, Field


def as_utc(value: datetime) -> datetime:
    # sqlite hands timestamps back without tzinfo; they were stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]

# integer columns are int4 on PostgreSQL
INT4_MAX = 2**31 - 1
INT4_MIN = -2**31

Int4 = Annotated[int, Field(ge=INT4_MIN, le=INT4_MAX)]
