from __future__ import annotations

import base64
import hashlib
import logging
import mimetypes
import secrets
from dataclasses import dataclass
from typing import Optional

from schemaless_attributes.config.settings import settings

from .FilesystemAdapter import storage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Blob:
    """
    A binary payload stored on a filesystem disk.
    
    The key embeds the filename (``<token>/<filename>``) so a blob can be
    rebuilt from the key stored on its owner.
    """
    
    key: str
    filename: str
    disk: str
    byte_size: Optional[int] = None
    checksum: Optional[str] = None
    content_type: Optional[str] = None
    
    @classmethod
    def generate_key(cls, filename: str) -> str:
        return f"{secrets.token_hex(14)}/{filename}"
    
    @staticmethod
    def compute_checksum(data: bytes) -> str:
        """Base64-encoded MD5 digest of the contents."""
        return base64.b64encode(hashlib.md5(data).digest()).decode('ascii')
    
    @classmethod
    def create_and_upload(
        cls,
        data: bytes,
        filename: str,
        disk: Optional[str] = None,
        content_type: Optional[str] = None
    ) -> Blob:
        """Store data under a fresh key and return its blob."""
        disk_name = disk or settings.SCHEMALESS_ATTACHMENT_DISK
        blob = cls(
            key=cls.generate_key(filename),
            filename=filename,
            disk=disk_name,
            byte_size=len(data),
            checksum=cls.compute_checksum(data),
            content_type=content_type or mimetypes.guess_type(filename)[0] or 'application/octet-stream',
        )
        
        storage(disk_name).put(blob.key, data)
        logger.debug(f"Uploaded blob {blob.key} ({blob.byte_size} bytes) to disk {disk_name}")
        
        return blob
    
    @classmethod
    def from_key(cls, key: str, disk: Optional[str] = None) -> Blob:
        """Rebuild a blob reference from its stored key."""
        filename = key.rsplit('/', 1)[-1]
        return cls(key=key, filename=filename, disk=disk or settings.SCHEMALESS_ATTACHMENT_DISK)
    
    def exists(self) -> bool:
        return storage(self.disk).exists(self.key)
    
    def download(self) -> bytes:
        """Get the blob contents."""
        data = storage(self.disk).get(self.key)
        if data is None:
            raise FileNotFoundError(f"Blob not found: {self.key}")
        return data
    
    def purge(self) -> bool:
        """Delete the blob contents from its disk."""
        deleted = storage(self.disk).delete(self.key)
        logger.debug(f"Purged blob {self.key} from disk {self.disk}")
        return deleted
