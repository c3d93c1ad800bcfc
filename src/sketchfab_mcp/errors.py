"""Error taxonomy for Sketchfab API access."""

from typing import Optional


class SketchfabError(Exception):
    """Base class for every failure raised while talking to Sketchfab."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidApiKeyError(SketchfabError):
    def __init__(self):
        super().__init__("Invalid Sketchfab API key", status_code=401)


class RateLimitError(SketchfabError):
    def __init__(self):
        super().__init__("Sketchfab API rate limit exceeded. Try again later.", status_code=429)


class ModelNotFoundError(SketchfabError):
    def __init__(self, uid: str):
        super().__init__(f"Model with UID {uid} not found", status_code=404)
        self.uid = uid


class ModelNotDownloadableError(SketchfabError):
    def __init__(self):
        super().__init__("Model is not downloadable", status_code=400)


class DownloadForbiddenError(SketchfabError):
    def __init__(self):
        super().__init__("You do not have permission to download this model", status_code=403)


class SketchfabAPIError(SketchfabError):
    """Non-2xx catalog response without a more specific meaning."""

    def __init__(self, status_code: int, reason: str = ""):
        message = f"Sketchfab API error ({status_code})"
        if reason:
            message += f": {reason}"
        super().__init__(message, status_code)


class DownloadError(SketchfabError):
    """Non-2xx response while fetching a signed asset URL."""

    def __init__(self, status_code: int, reason: str = ""):
        message = f"Download error ({status_code})"
        if reason:
            message += f": {reason}"
        super().__init__(message, status_code)


class SketchfabTransportError(SketchfabError):
    """No response was received at all."""

    def __init__(self, cause: Exception):
        super().__init__(f"Network error accessing Sketchfab API: {cause}")
        self.cause = cause
