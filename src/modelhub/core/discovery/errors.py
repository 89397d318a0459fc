"""Error types for live model discovery."""


class DiscoveryError(Exception):
    """Fetching or decoding a provider's model list failed."""

    def __init__(self, provider: str, detail: str = "") -> None:
        self.provider = provider
        self.detail = detail
        super().__init__(f"Model discovery failed for {provider}" + (f": {detail}" if detail else ""))
