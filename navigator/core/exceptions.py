class NavigatorError(Exception):
    """Base exception for stream selection errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ProviderUnavailable(NavigatorError):
    """Raised when every mirror of a provider failed for this round."""

    def __init__(self, provider_name: str, attempts: int):
        self.provider_name = provider_name
        self.attempts = attempts
        super().__init__(
            f"All mirrors failed for {provider_name} ({attempts} attempted)"
        )


class MalformedConfig(NavigatorError):
    """Raised while decoding a user configuration that cannot be read."""
