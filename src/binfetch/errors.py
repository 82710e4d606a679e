"""binfetch error taxonomy."""

from __future__ import annotations


class BinfetchError(RuntimeError):
    """Stable error surfaced to the CLI as a reason code plus message."""

    code = "BINFETCH_ERROR"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(detail or self.code)


class ParseError(BinfetchError):
    code = "PARSE_ERROR"


class TruncatedListingError(BinfetchError):
    """Listing exceeded a single page. Not transient; never retried."""

    code = "TRUNCATED_LISTING"


class NotFoundError(BinfetchError):
    code = "NOT_FOUND"


class TransportError(BinfetchError):
    code = "TRANSPORT_ERROR"


class ConfigError(BinfetchError):
    code = "CONFIG_ERROR"

