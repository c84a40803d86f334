from .field_types import INT32_MAX, INT32_MIN, Int32, parse_timestamp

__all__ = ["INT32_MAX", "INT32_MIN", "Int32", "parse_timestamp"]
