"""
Typed access to URL query parameters.

Example:
    >>> params = QueryParams.from_url("https://example.com/items?page=2&all=true")
    >>> params.get_as_int("page", 1)
    (2, False)
    >>> params.get_as_int("limit", 50)
    (50, True)
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import timedelta
from urllib.parse import ParseResult, SplitResult, parse_qs, urlsplit

from . import strconv


class QueryParams:
    """
    Read-only view over parsed query parameters.

    Only the first value of a repeated key is considered. A missing key
    yields ``(default, True)``; a present key follows the
    :mod:`~appcommon.params.strconv` rules, so a blank value also falls back
    to the default.
    """

    def __init__(self, params: Mapping[str, Sequence[str]] | None = None) -> None:
        self._params: dict[str, list[str]] = {
            key: list(values) for key, values in (params or {}).items()
        }

    @classmethod
    def from_url(cls, url: str | SplitResult | ParseResult) -> QueryParams:
        """
        Build query parameters from a URL.

        Args:
            url: URL string or an already split/parsed URL

        Returns:
            QueryParams holding every key of the query string, including
            keys with blank values
        """
        if isinstance(url, str):
            url = urlsplit(url)
        return cls(parse_qs(url.query, keep_blank_values=True))

    def has(self, key: str) -> bool:
        """Check whether *key* is present in the query."""
        return key in self._params

    def get(self, key: str) -> str:
        """Return the first value for *key*, or an empty string."""
        values = self._params.get(key)
        return values[0] if values else ""

    def __contains__(self, key: object) -> bool:
        return key in self._params

    def get_as_string(self, key: str, default: str) -> tuple[str, bool]:
        if not self.has(key):
            return default, True
        return strconv.get_as_string(self.get(key), default)

    def get_as_int(self, key: str, default: int) -> tuple[int, bool]:
        if not self.has(key):
            return default, True
        return strconv.get_as_int(self.get(key), default)

    def get_as_bool(self, key: str, default: bool) -> tuple[bool, bool]:
        if not self.has(key):
            return default, True
        return strconv.get_as_bool(self.get(key), default)

    def get_as_float(self, key: str, default: float) -> tuple[float, bool]:
        if not self.has(key):
            return default, True
        return strconv.get_as_float(self.get(key), default)

    def get_as_duration(self, key: str, default: timedelta) -> tuple[timedelta, bool]:
        if not self.has(key):
            return default, True
        return strconv.get_as_duration(self.get(key), default)


__all__ = ["QueryParams"]
