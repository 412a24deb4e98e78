from .FilesystemAdapter import (
    FilesystemAdapter, LocalFilesystemAdapter, MemoryFilesystemAdapter,
    StorageManager, storage_manager, storage
)
from .Blob import Blob
from .Attachments import AttachedOne, HasOneAttached, has_one_attached

__all__ = [
    "FilesystemAdapter",
    "LocalFilesystemAdapter",
    "MemoryFilesystemAdapter",
    "StorageManager",
    "storage_manager",
    "storage",
    "Blob",
    "AttachedOne",
    "HasOneAttached",
    "has_one_attached",
]
