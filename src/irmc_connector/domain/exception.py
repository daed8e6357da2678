class IrmcError(Exception):
    """Base exception for everything raised by the connector"""


class TransportError(IrmcError):
    """Connection could not be established or was interrupted"""


class HttpStatusError(IrmcError):
    """Server answered with a non-success status"""

    def __init__(self, status_code: int, reason: str, url: str = ""):
        self.status_code = status_code
        self.reason = reason
        self.url = url
        msg = f"HTTP {status_code} {reason}"
        if url:
            msg = f"{msg} for {url}"
        super().__init__(msg)


class FileAccessError(IrmcError):
    """Local file for upload could not be read"""

    def __init__(self, path: str, detail: str = ""):
        self.path = path
        msg = f"Cannot read upload file '{path}'"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class MissingLocationHeader(IrmcError):
    """Upload accepted but the server did not say where the task lives"""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(
            f"Response {status_code} from {url} has no 'Location' header"
        )
