"""utils/encoding.py

Charset-aware percent-encoding for query parameter values.
"""

import urllib.parse
from typing import Optional

from urlparams.exceptions import EncodingError
from urlparams.utils.validators import check_not_none, has_malformed_escape

__all__ = ["encode", "decode"]

# Kept unescaped on top of the alphanumerics and "_.-~" quote_plus always keeps.
# "~" stays literal (RFC 3986 unreserved) rather than becoming %7E.
_SAFE = "*"


def encode(value: str, charset: Optional[str]) -> str:
    """
    Form-encode a value (space becomes ``+``).

    Args:
        value: Decoded text.
        charset: Codec used for the escaped bytes, or None for passthrough.

    Returns:
        The encoded value.

    Raises:
        EncodingError: If the value cannot be represented in ``charset``.
    """
    check_not_none(value, "value to encode")
    if charset is None:
        return value

    try:
        return urllib.parse.quote_plus(
            value, safe=_SAFE, encoding=charset, errors="strict"
        )
    except UnicodeError as exc:
        raise EncodingError(f"Cannot encode {value!r} as {charset}") from exc


def decode(value: str, charset: Optional[str]) -> str:
    """
    Decode a form-encoded value (``+`` becomes space).

    Raises:
        EncodingError: On malformed escapes or bytes invalid in ``charset``.
    """
    check_not_none(value, "value to decode")
    if charset is None:
        return value

    if has_malformed_escape(value):
        raise EncodingError(f"Malformed escape pair in {value!r}")

    try:
        return urllib.parse.unquote_plus(value, encoding=charset, errors="strict")
    except UnicodeError as exc:
        raise EncodingError(f"Cannot decode {value!r} as {charset}") from exc
