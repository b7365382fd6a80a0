import tempfile
from pathlib import Path
from urllib.parse import quote, unquote

import logfire

from interview.domain.experience.port.blob_store import BlobStorePort
from interview.domain.shared.error import BlobStoreError, ConfigurationError


class LocalBlobStoreAdapter(BlobStorePort):
    """Local filesystem implementation of BlobStorePort.

    Objects live under ``base_path`` and are addressed as ``{base_url}/{path}``.
    """

    def __init__(self, base_path: str, base_url: str) -> None:
        self.base_path = Path(base_path)
        self.base_url = base_url.rstrip("/")
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(f"Blob store root is not usable: {base_path}: {e}") from e

    def _safe_path(self, path: str) -> Path:
        """Resolve a logical path within base_path, rejecting traversal attempts."""
        parts = [p for p in path.split("/") if p]
        if not parts or any(p in (".", "..") or "\\" in p or "\x00" in p for p in parts):
            raise BlobStoreError(f"Invalid object path: {path!r}")
        target = self.base_path.joinpath(*parts)
        if not target.resolve().is_relative_to(self.base_path.resolve()):
            raise BlobStoreError(f"Invalid object path: {path!r}")
        return target

    def path_for_url(self, url: str) -> Path:
        prefix = f"{self.base_url}/"
        if not url.startswith(prefix):
            raise BlobStoreError(f"URL is not managed by this store: {url}")
        return self._safe_path(unquote(url[len(prefix) :]))

    async def upload(self, path: str, content: bytes, content_type: str) -> str:
        target = self._safe_path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            # Atomic write: write to temp file then rename
            fd, tmp_path = tempfile.mkstemp(dir=target.parent)
            try:
                with open(fd, "wb") as f:
                    f.write(content)
                Path(tmp_path).replace(target)
            except Exception:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as e:
            logfire.error("Image upload failed", path=path, error=str(e))
            raise BlobStoreError(f"Failed to store {path}: {e}") from e

        logfire.info("Image stored", path=path, size=len(content), content_type=content_type)
        return f"{self.base_url}/{quote(target.relative_to(self.base_path).as_posix())}"

    async def delete(self, url: str) -> None:
        target = self.path_for_url(url)
        try:
            target.unlink(missing_ok=True)
        except OSError as e:
            logfire.error("Image delete failed", url=url, error=str(e))
            raise BlobStoreError(f"Failed to delete {url}: {e}") from e
        logfire.info("Image deleted", url=url)
