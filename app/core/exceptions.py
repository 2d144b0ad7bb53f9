class CatalogError(Exception):
    """Base error for catalog requests; carries the HTTP status it maps to."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class MissingParameter(CatalogError):
    status_code = 400


class InvalidParameter(CatalogError):
    status_code = 400


class UpstreamError(CatalogError):
    """Anything that went wrong talking to Douban."""


class UpstreamTimeout(UpstreamError):
    pass


class UpstreamHTTPError(UpstreamError):
    pass


class UpstreamParseFailure(UpstreamError):
    pass
