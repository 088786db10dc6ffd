"""Provider errors raised by API clients."""


class ProviderError(Exception):
    """Base class for third-party provider failures."""


class ProviderUnavailable(ProviderError):
    """Provider unreachable or answered with a non-2xx status."""


class ProviderShapeMismatch(ProviderError):
    """Provider response is missing fields or has unexpected types."""
