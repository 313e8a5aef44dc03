class ProviderError(RuntimeError):
    """Raised when the hosted model call fails."""


class ProviderQuotaError(ProviderError):
    """Raised when the provider rejects the call for rate-limit or quota reasons."""


class ProviderTimeoutError(ProviderError):
    """Raised when the provider does not answer before its deadline."""
