"""Code storage interface."""

import abc
from typing import Any, Optional


def build_cache_key(template: str, **kwargs: Any) -> str:
    """Build cache key from template and parameters."""
    return template.format(**kwargs)


class CodeStorage(abc.ABC):
    """
    Key-value storage for pending verification codes.

    Implementations only need to honour ``expire`` as a best effort,
    the verification store checks expiry on its own.
    """

    name: str = "abstract"

    @abc.abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get value from storage, None when missing."""

    @abc.abstractmethod
    async def set(self, key: str, value: str, expire: Optional[int] = None) -> None:
        """Set value, optionally expiring after ``expire`` seconds."""

    @abc.abstractmethod
    async def delete(self, key: str) -> None:
        """Delete value from storage. Missing keys are ignored."""

    async def ping(self) -> bool:
        """Check that the storage is reachable."""
        return True

    async def close(self) -> None:
        """Release resources held by the storage."""
