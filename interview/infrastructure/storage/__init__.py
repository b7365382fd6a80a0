from interview.infrastructure.storage.di import StorageProvider

__all__ = ["StorageProvider"]
