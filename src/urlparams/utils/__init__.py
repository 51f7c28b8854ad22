"""src/urlparams/utils/__init__.py"""
