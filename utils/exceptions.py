"""
Exception types for the Urban Travel Health API
"""


class TravelHealthError(Exception):
    """Base class for errors raised by the service"""


class ValidationError(TravelHealthError):
    """Request input is missing or malformed (HTTP 400)"""


class ConfigurationError(TravelHealthError):
    """Provider credentials are not configured (HTTP 500)"""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing credentials: {', '.join(self.missing)}")


class UpstreamError(TravelHealthError):
    """A provider could not answer or answered with an unusable payload"""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")
