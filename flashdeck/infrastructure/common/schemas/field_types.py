"""Field types shared by the request/response schemas."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import Field, StrictInt

# Integer columns are 32-bit signed
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Strict: "3", true and 3.0 are not integers on the wire
Int32 = Annotated[StrictInt, Field(ge=INT32_MIN, le=INT32_MAX)]


def parse_timestamp(value: Any) -> datetime:
    """Accept only ISO 8601 strings; numbers are not timestamps on the wire."""
    if not isinstance(value, str):
        msg = "timestamp must be an ISO 8601 string"
        raise ValueError(msg)
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        msg = f"invalid ISO 8601 timestamp: {value!r}"
        raise ValueError(msg) from e
