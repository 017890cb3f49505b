from typing import Optional


class AnimeAPIError(Exception):
    """Base class for every failure that ends up in an error envelope."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AnimeAPIError):
    pass


class NotFoundError(AnimeAPIError):
    pass


class UpstreamError(AnimeAPIError):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ParseError(AnimeAPIError):
    pass
