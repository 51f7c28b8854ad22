"""src/urlparams/version.py"""

__version__ = "0.5.0"
