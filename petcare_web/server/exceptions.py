"""Custom exceptions for the petcare-web server."""


class ServerError(Exception):
    """Base class for errors that prevent the server from starting."""

    pass


class AssetsNotFoundError(ServerError):
    """Raised when the assets root or the fallback document is missing.

    Checked once at startup so the server never runs in a state where every
    request would fail.
    """

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"{reason}: {path}")
