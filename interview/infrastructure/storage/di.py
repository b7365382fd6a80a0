import logging

from dishka import Scope, provide

from interview.config import Config
from interview.domain.experience.port.blob_store import BlobStorePort
from interview.util.di import Provider

logger = logging.getLogger(__name__)


class StorageProvider(Provider):
    @provide(scope=Scope.APP)
    def get_blob_store(self, config: Config) -> BlobStorePort:
        storage = config.storage
        if storage.backend == "s3":
            from interview.infrastructure.storage.s3 import S3BlobStoreAdapter

            logger.info("Using S3 blob store: bucket=%s region=%s", storage.s3.bucket, storage.s3.region)
            return S3BlobStoreAdapter(
                bucket=storage.s3.bucket,
                region=storage.s3.region,
                endpoint_url=storage.s3.endpoint_url,
            )

        from interview.infrastructure.storage.local import LocalBlobStoreAdapter

        logger.info("Using local blob store at %s", storage.local.path)
        return LocalBlobStoreAdapter(
            base_path=storage.local.path,
            base_url=storage.local.base_url,
        )
