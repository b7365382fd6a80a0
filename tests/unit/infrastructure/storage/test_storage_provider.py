"""StorageProvider picks the blob store backend from config."""

import pytest
from dishka import make_async_container

from interview.application.di import ConfigProvider
from interview.config import Config, LocalStorageConfig, S3StorageConfig, StorageConfig
from interview.domain.experience.port.blob_store import BlobStorePort
from interview.infrastructure.storage import StorageProvider
from interview.infrastructure.storage.local import LocalBlobStoreAdapter
from interview.infrastructure.storage.s3 import S3BlobStoreAdapter


async def _resolve(config: Config) -> BlobStorePort:
    container = make_async_container(ConfigProvider(), StorageProvider(), context={Config: config})
    try:
        return await container.get(BlobStorePort)
    finally:
        await container.close()


class TestStorageProvider:
    @pytest.mark.asyncio
    async def test_local_backend(self, tmp_path):
        config = Config(
            _env_file=None,
            storage=StorageConfig(
                backend="local",
                local=LocalStorageConfig(path=str(tmp_path), base_url="http://cdn.test/media"),
            ),
        )

        store = await _resolve(config)

        assert isinstance(store, LocalBlobStoreAdapter)
        assert store.base_url == "http://cdn.test/media"

    @pytest.mark.asyncio
    async def test_s3_backend(self):
        config = Config(
            _env_file=None,
            storage=StorageConfig(
                backend="s3",
                s3=S3StorageConfig(bucket="interview-media", region="eu-west-2"),
            ),
        )

        store = await _resolve(config)

        assert isinstance(store, S3BlobStoreAdapter)
        assert store.bucket == "interview-media"
        assert store.region == "eu-west-2"
