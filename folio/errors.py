class FolioError(Exception):
    """Base class for errors raised by the content and subscription services."""


class NotFound(FolioError):
    """The requested content id does not exist in the content store."""

    def __init__(self, post_id: str):
        super().__init__(f"No content found for id {post_id!r}")
        self.post_id = post_id


class MalformedContent(FolioError):
    """Front matter is unterminated, or a required field is missing or mistyped."""

    def __init__(self, post_id: str | None, reason: str):
        where = f" in {post_id!r}" if post_id else ""
        super().__init__(f"Malformed content{where}: {reason}")
        self.post_id = post_id
        self.reason = reason


class RenderError(FolioError):
    """Markdown could not be converted to HTML."""


class ValidationError(FolioError):
    """A subscription request is missing a required field."""


class UpstreamError(FolioError):
    """The mailing-list API rejected the request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UnexpectedError(FolioError):
    """Network failure or any other unanticipated error on the subscription path."""


class ConfigurationError(FolioError):
    """Required configuration is absent or unusable."""
