from abc import abstractmethod
from typing import Protocol

from interview.domain.shared.port import Port


class BlobStorePort(Port, Protocol):
    @abstractmethod
    async def upload(self, path: str, content: bytes, content_type: str) -> str:
        """Store content under a logical path and return its durable URL."""
        ...

    @abstractmethod
    async def delete(self, url: str) -> None:
        """Delete the object a URL returned by upload() points at."""
        ...
