from typing import Any
from urllib.parse import quote, unquote, urlparse

import aioboto3
import logfire
from botocore.exceptions import BotoCoreError, ClientError

from interview.domain.experience.port.blob_store import BlobStorePort
from interview.domain.shared.error import BlobStoreError, ConfigurationError


class S3BlobStoreAdapter(BlobStorePort):
    """S3 (or S3-compatible) implementation of BlobStorePort.

    Without an ``endpoint_url`` objects are addressed virtual-host style,
    ``https://{bucket}.s3.{region}.amazonaws.com/{key}``; with one they are
    addressed path style, ``{endpoint_url}/{bucket}/{key}``.
    """

    def __init__(
        self,
        bucket: str,
        region: str,
        endpoint_url: str | None = None,
        session: Any | None = None,
    ) -> None:
        if not bucket:
            raise ConfigurationError("S3 blob store requires a bucket name")
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url.rstrip("/") if endpoint_url else None
        self._session = session or aioboto3.Session()

    def _client(self):
        return self._session.client(
            "s3",
            region_name=self.region,
            endpoint_url=self.endpoint_url,
        )

    def url_for_key(self, key: str) -> str:
        if self.endpoint_url:
            return f"{self.endpoint_url}/{self.bucket}/{quote(key)}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{quote(key)}"

    def key_for_url(self, url: str) -> str:
        key = unquote(urlparse(url).path).lstrip("/")
        if self.endpoint_url:
            bucket_prefix = f"{self.bucket}/"
            if not key.startswith(bucket_prefix):
                raise BlobStoreError(f"URL is not in bucket {self.bucket}: {url}")
            key = key[len(bucket_prefix) :]
        if not key:
            raise BlobStoreError(f"URL has no object key: {url}")
        return key

    async def upload(self, path: str, content: bytes, content_type: str) -> str:
        key = path.lstrip("/")
        try:
            async with self._client() as s3:
                await s3.put_object(
                    Bucket=self.bucket,
                    Key=key,
                    Body=content,
                    ContentType=content_type,
                )
        except (BotoCoreError, ClientError) as e:
            logfire.error("S3 upload failed", bucket=self.bucket, key=key, error=str(e))
            raise BlobStoreError(f"Failed to upload {key} to S3: {e}") from e

        logfire.info("Image uploaded to S3", bucket=self.bucket, key=key, size=len(content))
        return self.url_for_key(key)

    async def delete(self, url: str) -> None:
        key = self.key_for_url(url)
        try:
            async with self._client() as s3:
                await s3.delete_object(Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            logfire.error("S3 delete failed", bucket=self.bucket, key=key, error=str(e))
            raise BlobStoreError(f"Failed to delete {key} from S3: {e}") from e
        logfire.info("Image deleted from S3", bucket=self.bucket, key=key)
