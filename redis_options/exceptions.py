from __future__ import annotations


class RedisOptionsError(Exception): ...


class DecodeError(RedisOptionsError):
    """Raised when serialized options cannot be decoded.

    Parameters
    ----------
    message : str
        Human readable description of the failure.
    key : str | None
        The offending top-level key, or None when the payload itself is
        malformed (not an object, not valid JSON).
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key
