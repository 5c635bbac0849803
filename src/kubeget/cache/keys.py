"""Cache key builders for consistent key formatting."""


class CacheKeys:
    """Cache key builders for consistent key formatting."""

    PREFIX = "kubeget"

    @classmethod
    def preferred_resources(cls, host: str) -> str:
        """Key for a server's preferred-resources snapshot."""
        return f"{cls.PREFIX}:discovery:preferred:{host}"
