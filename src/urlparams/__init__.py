"""src/urlparams/__init__.py

urlparams - Parse, edit and rebuild URLs and their query strings.

urlparams splits a URL into scheme, user info, host, port, path and
fragment, and keeps the query string as an ordered multi-valued mapping
that can be edited in place before the URL is serialized again.

Key Features:
    - Zero external dependencies
    - Insertion order of names and values preserved
    - Multiple values per parameter name
    - Charset-aware percent-encoding (or none at all)
    - Full type hints (PEP 561)

Example:
    Editing a query string::

        from urlparams import parse

        url = parse("http://example.com/list?tag=a&tag=b&page=1")
        url.get_raw_params("tag")        # ['a', 'b']
        url.update_param("page", "2")
        url.add_param("q", "hello world")
        url.remove_params("tag")
        str(url)  # 'http://example.com/list?page=2&q=hello+world'

    Raw passthrough without encoding::

        url = parse("http://example.com/?a=%20", charset=None)
        url.get_param("a")  # '%20'
"""

import logging

from urlparams.exceptions import (
    EncodingError,
    InvalidArgumentError,
    MalformedURLError,
    UrlParamsError,
)
from urlparams.query import QueryParams
from urlparams.url import DEFAULT_CHARSET, KNOWN_PROTOCOLS, ParsedURL, parse
from urlparams.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "parse",
    "ParsedURL",
    "QueryParams",
    "DEFAULT_CHARSET",
    "KNOWN_PROTOCOLS",
    "UrlParamsError",
    "InvalidArgumentError",
    "MalformedURLError",
    "EncodingError",
    "__version__",
]
