"""src/urlparams/url.py

URL parser and builder for urlparams.
"""

import logging
import urllib.parse
from typing import Dict, Iterable, List, Optional, Tuple

from urlparams.exceptions import InvalidArgumentError, MalformedURLError
from urlparams.query import QueryParams
from urlparams.utils.encoding import decode, encode
from urlparams.utils.validators import check_not_none, validate_charset, validate_url

__all__ = ["ParsedURL", "parse", "DEFAULT_CHARSET", "KNOWN_PROTOCOLS"]

logger = logging.getLogger(__name__)

DEFAULT_CHARSET = "utf-8"

# Schemes accepted when fragments are not supported (protocol-style parsing)
KNOWN_PROTOCOLS = frozenset({"http", "https", "ftp", "file", "jar", "mailto"})

_MAX_PORT = 65535


def _parse_port(value: str) -> Optional[int]:
    if not value.isdigit() or not value.isascii():
        return None
    port = int(value)
    return port if port <= _MAX_PORT else None


def _split_authority(
    netloc: str,
) -> Tuple[Optional[str], Optional[str], Optional[int]]:
    """Split ``user:password@host:port`` keeping the original case."""
    user_info: Optional[str] = None
    hostport = netloc
    if "@" in netloc:
        user_info, _, hostport = netloc.rpartition("@")

    if hostport.startswith("["):
        end = hostport.find("]")
        host, rest = hostport[: end + 1], hostport[end + 1 :]
        port_str = rest[1:] if rest.startswith(":") else ""
    else:
        host, _, port_str = hostport.partition(":")

    return user_info, host or None, _parse_port(port_str)


class ParsedURL:
    """
    A URL decomposed into its components plus ordered query parameters.

    Query values are stored percent-encoded; ``get_param`` and
    ``get_params`` decode them with ``charset``. With ``charset=None``
    values pass through untouched in both directions.

    With ``supports_fragment=False`` the URL is parsed protocol-style: the
    scheme must be one of ``KNOWN_PROTOCOLS`` and anything after ``#`` is
    not treated as a fragment. Both styles apply the same character rules,
    so spaces and other unescaped delimiters are rejected either way.

    Example::

        url = ParsedURL("http://example.com/search?q=a&page=2")
        url.update_param("page", "3")
        url.add_param("lang", "en us")
        str(url)  # 'http://example.com/search?q=a&page=3&lang=en+us'
    """

    __slots__ = (
        "scheme",
        "user_info",
        "host",
        "port",
        "path",
        "fragment",
        "charset",
        "supports_fragment",
        "params",
        "_authority",
    )

    def __init__(
        self,
        url: str,
        charset: Optional[str] = DEFAULT_CHARSET,
        supports_fragment: bool = True,
    ):
        check_not_none(url, "url")
        validate_charset(charset)
        validate_url(url, supports_fragment)

        try:
            parts = urllib.parse.urlsplit(url, allow_fragments=supports_fragment)
        except ValueError as exc:
            raise MalformedURLError(f"{exc}: {url}") from exc

        # urlsplit lowercases the scheme, take it from the source instead
        scheme = url[: len(parts.scheme)] if parts.scheme else None
        if not supports_fragment and (
            scheme is None or scheme.lower() not in KNOWN_PROTOCOLS
        ):
            raise MalformedURLError(f"unknown protocol: {scheme or url}")

        self.charset = charset
        self.supports_fragment = supports_fragment
        self.scheme = scheme
        self.user_info, self.host, self.port = _split_authority(parts.netloc)
        self.path = parts.path
        self._authority = url[len(parts.scheme) :].lstrip(":").startswith("//")

        raw = url
        self.fragment: Optional[str] = None
        if supports_fragment and "#" in raw:
            raw, _, self.fragment = raw.partition("#")
        _, _, query = raw.partition("?")
        self.params = QueryParams.parse(query)

        logger.debug(
            "Parsed %r: scheme=%r host=%r port=%r path=%r params=%d",
            url,
            self.scheme,
            self.host,
            self.port,
            self.path,
            len(self.params),
        )

    def add_param(self, name: str, value: str) -> None:
        """Encode ``value`` and append it to the values of ``name``."""
        self.add_params(name, [value])

    def add_params(self, name: str, values: Iterable[str]) -> None:
        """Encode each of ``values`` and append them in order."""
        check_not_none(name, "name")
        check_not_none(values, "values")
        self.params.extend(name, [encode(value, self.charset) for value in values])

    def update_param(self, name: str, value: str) -> None:
        """Replace the values of ``name`` with a single value."""
        self.update_params(name, value)

    def update_params(self, name: str, *values: str) -> None:
        """
        Replace all values of ``name`` with the encoded ``values``.

        Raises:
            InvalidArgumentError: If ``name`` is None or no values are given.
        """
        check_not_none(name, "name")
        if not values:
            raise InvalidArgumentError("values should not be empty")
        self.params.replace(name, [encode(value, self.charset) for value in values])

    def remove_params(self, name: Optional[str]) -> None:
        """Delete ``name``; does nothing when it is None or absent."""
        self.params.remove(name)

    def get_raw_params(self, name: str) -> Optional[List[str]]:
        """All values of ``name`` as stored (encoded), or None."""
        return self.params.get_all(name)

    def get_raw_param(self, name: str) -> Optional[str]:
        """First value of ``name`` as stored (encoded), or None."""
        return self.params.first(name)

    def get_param(self, name: str) -> Optional[str]:
        """
        First value of ``name``, decoded.

        Raises:
            EncodingError: If the value cannot be decoded with ``charset``.
        """
        value = self.get_raw_param(name)
        return None if value is None else decode(value, self.charset)

    def get_params(self, name: str) -> Optional[List[str]]:
        """All values of ``name``, decoded."""
        values = self.get_raw_params(name)
        if values is None:
            return None
        return [decode(value, self.charset) for value in values]

    def get_simple(self) -> Dict[str, str]:
        """First encoded value per name. Ordering is not guaranteed."""
        return {name: values[0] for name, values in self.params.items()}

    def create_query_string(self) -> str:
        """Serialize the parameters; no parameters give an empty string."""
        return self.params.to_query_string()

    def to_string(self) -> str:
        """Reassemble the URL from its current components."""
        parts: List[str] = []
        if self.scheme is not None:
            parts.append(self.scheme + ":")
        if (
            self._authority
            or self.host is not None
            or self.user_info is not None
            or self.port is not None
        ):
            parts.append("//")
        if self.user_info is not None:
            parts.append(self.user_info + "@")
        if self.host is not None:
            parts.append(self.host)
        if self.port is not None:
            parts.append(f":{self.port}")
        parts.append(self.path)

        query = self.create_query_string()
        if query:
            parts.append("?" + query)
        if self.fragment is not None:
            parts.append("#" + self.fragment)
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"


def parse(
    url: str,
    charset: Optional[str] = DEFAULT_CHARSET,
    supports_fragment: bool = True,
) -> ParsedURL:
    """
    Parse ``url`` into a ParsedURL.

    Args:
        url: URL string to parse.
        charset: Codec for percent-encoding parameter values, None to
            disable encoding.
        supports_fragment: Parse scheme-style (True) or protocol-style.

    Raises:
        InvalidArgumentError: If ``url`` is None or ``charset`` is unknown.
        MalformedURLError: If ``url`` is not a valid URL.
    """
    return ParsedURL(url, charset, supports_fragment)
