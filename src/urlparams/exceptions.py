"""src/urlparams/exceptions.py

urlparams Exceptions hierarchy.
"""


class UrlParamsError(Exception):
    """Base exception for all urlparams errors."""


class InvalidArgumentError(UrlParamsError):
    """
    A required argument was None, a required value list was empty,
    or the requested charset is not supported.
    """


class MalformedURLError(UrlParamsError):
    """The string could not be parsed as a structurally valid URL."""

    def __init__(self, message: str = "Malformed URL"):
        super().__init__(message)


class EncodingError(UrlParamsError):
    """
    Percent-encoding or decoding failed under the chosen charset.
    """
