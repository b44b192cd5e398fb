import hashlib


def sha256_text(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


class ContentIdFactory:
    """Fallback ids for content entries that arrive without one.

    Ids are unique within one factory (a monotonic counter is mixed into the
    hash) and reproducible for the same payload.
    """

    def __init__(self, prefix: str = "content", length: int = 16) -> None:
        self.prefix = prefix
        self.length = length
        self._counter = 0

    def next_id(self, mint: str, body: str) -> str:
        self._counter += 1
        digest = sha256_text(f"{mint}:{self._counter}:{body}")
        return f"{self.prefix}-{digest[: self.length]}"
