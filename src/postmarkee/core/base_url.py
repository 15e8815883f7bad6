"""Validated base URL for the Postmark API endpoint."""

from __future__ import annotations

from urllib.parse import quote, urlsplit, urlunsplit

from postmarkee.core.exceptions import UrlError

DEFAULT_BASE_URL = "https://api.postmarkapp.com"

# Schemes that always carry an authority and a hierarchical path.
_SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp", "file"})
_HTTP_SCHEMES = ("https", "http")

_CONSTRUCT = object()


def _normalize(raw: str) -> str:
    """Lower-case the scheme and give special schemes a root path."""
    parts = urlsplit(raw.strip())
    path = parts.path
    if parts.scheme in _SPECIAL_SCHEMES and not path:
        path = "/"
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))


def _cannot_be_a_base(raw: str, scheme: str) -> bool:
    if scheme in _SPECIAL_SCHEMES:
        return False
    remainder = raw.strip()[len(scheme) + 1 :]
    return not remainder.startswith("/")


class BaseUrl:
    """An http(s) URL that path segments can be appended to.

    Instances only come from :meth:`parse` or :meth:`default`, so holding a
    ``BaseUrl`` means the checks below have passed.
    """

    __slots__ = ("_url",)

    def __init__(self, url: str, *, _token: object = None) -> None:
        if _token is not _CONSTRUCT:
            raise TypeError("BaseUrl instances are created with BaseUrl.parse()")
        self._url = url

    @classmethod
    def parse(cls, raw: str) -> BaseUrl:
        """Validate ``raw`` and wrap it.

        Raises:
            UrlError: If the URL is malformed or relative, cannot be a base,
                is not http(s), or has no host.
        """
        try:
            url = _normalize(raw)
            parts = urlsplit(url)
            parts.port  # raises ValueError for a non-numeric or out-of-range port
        except ValueError as e:
            raise UrlError(raw, "expecting a valid URL") from e

        if not parts.scheme:
            raise UrlError(url, "expecting an absolute URL")
        if _cannot_be_a_base(raw, parts.scheme):
            raise UrlError(url, "expecting a base URL")
        if parts.scheme not in _HTTP_SCHEMES:
            raise UrlError(url, "expecting an HTTP URL")
        if not parts.hostname:
            raise UrlError(url, "expecting a URL with a host")

        return cls(url, _token=_CONSTRUCT)

    @classmethod
    def default(cls) -> BaseUrl:
        """Postmark's production endpoint."""
        return cls.parse(DEFAULT_BASE_URL)

    def as_url(self) -> str:
        return self._url

    def join(self, segment: str) -> str:
        """Return this URL with one percent-encoded path segment appended."""
        parts = urlsplit(self._url)
        path = parts.path if parts.path.endswith("/") else f"{parts.path}/"
        path += quote(segment, safe="")
        return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseUrl):
            return NotImplemented
        return self._url == other._url

    def __hash__(self) -> int:
        return hash(self._url)

    def __str__(self) -> str:
        return self._url

    def __repr__(self) -> str:
        return f"BaseUrl({self._url!r})"
