# Cache keys for user records

class CacheKeyGenerator:
    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def generate(self, identifier: str) -> str:
        """The record identifier is the key; an optional prefix namespaces a shared Redis."""
        return f"{self.prefix}{identifier}"
