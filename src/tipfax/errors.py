"""
tipfax error types.

Transport failures surface to the caller; payload-shape problems are
recovered where they are found and never leave the dispatch loop.
"""

from typing import Any, Optional


class TipfaxError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class ConfigError(TipfaxError):
    def __init__(self, message: str, code: str = "config_error"):
        super().__init__(code, message)


class TransportError(TipfaxError):
    def __init__(self, message: str, code: str = "transport_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)


class ParseError(TipfaxError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("parse_error", message, details)
