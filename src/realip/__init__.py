"""Originating client IP resolution for requests behind reverse proxies."""

__version__ = "0.1.0"
