"""utils/validators.py

Validation utilities for urlparams.
"""

import codecs
import re
from typing import Any, Optional

from urlparams.exceptions import InvalidArgumentError, MalformedURLError

__all__ = [
    "check_not_none",
    "validate_charset",
    "validate_url",
    "has_malformed_escape",
]

_ILLEGAL_CHARS = re.compile(r'[\x00-\x20\x7f"<>\\^`{|}]')
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")


def check_not_none(value: Any, field_name: str) -> None:
    """Raise InvalidArgumentError when a required argument is None."""
    if value is None:
        raise InvalidArgumentError(f"{field_name} should not be null")


def validate_charset(charset: Optional[str]) -> None:
    """
    Ensure ``charset`` names a text encoding known to Python.

    ``None`` is accepted and means "no encoding". Bytes-to-bytes and
    str-to-str codecs such as ``base64`` or ``rot13`` are rejected.

    Raises:
        InvalidArgumentError: If the codec cannot be found or is not a
            text encoding.
    """
    if charset is None:
        return
    try:
        info = codecs.lookup(charset)
    except LookupError as exc:
        raise InvalidArgumentError(f"charset is not supported: {charset}") from exc

    if not getattr(info, "_is_text_encoding", True):
        raise InvalidArgumentError(f"charset is not a text encoding: {charset}")


def has_malformed_escape(value: str) -> bool:
    """Return True if a ``%`` is not followed by two hex digits."""
    return _MALFORMED_ESCAPE.search(value) is not None


def validate_url(url: str, supports_fragment: bool = True) -> None:
    """
    Check the general URL syntax before it is split into components.

    The same character rules apply with and without fragment support.
    When fragments are supported only one ``#`` may appear.

    Raises:
        MalformedURLError: On illegal characters, broken escapes, a second
            ``#`` or an invalid scheme.
    """
    match = _ILLEGAL_CHARS.search(url)
    if match:
        raise MalformedURLError(
            f"Illegal character {match.group()!r} at index {match.start()}: {url}"
        )

    if has_malformed_escape(url):
        raise MalformedURLError(f"Malformed escape pair: {url}")

    if supports_fragment and url.count("#") > 1:
        raise MalformedURLError(f"Illegal character '#' in fragment: {url}")

    # A ':' before any '/', '?' or '#' terminates a scheme
    head = re.split(r"[/?#]", url, maxsplit=1)[0]
    if ":" in head:
        scheme, _, rest = url.partition(":")
        if not _SCHEME.fullmatch(scheme):
            raise MalformedURLError(f"Illegal scheme name: {url}")
        if not rest:
            raise MalformedURLError(f"Expected scheme-specific part: {url}")
