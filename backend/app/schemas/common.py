from datetime import datetime, timezone
from typing import Annotated
from pydantic import AfterValidator, Field

def _naive_utc(v: datetime) -> datetime:
    # Columns are naive; aware input is converted to UTC first
    if v.tzinfo is not None:
        v = v.astimezone(timezone.utc).replace(tzinfo=None)
    return v

Timestamp = Annotated[datetime, AfterValidator(_naive_utc)]

# 1-100 chars; callers send null (not "") to clear a name
NameStr = Annotated[str, Field(min_length=1, max_length=100)]
