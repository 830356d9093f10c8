class ProviderError(Exception):
    """Raised when a news provider cannot deliver items with any of its credentials."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class AggregationError(Exception):
    """Raised when neither a provider nor the built-in sample set can produce a feed."""
