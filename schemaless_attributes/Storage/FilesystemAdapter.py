from __future__ import annotations

from typing import Any, Dict, Optional, Union
from abc import ABC, abstractmethod
import threading
from pathlib import Path

from schemaless_attributes.config import filesystems


class FilesystemAdapter(ABC):
    """Abstract filesystem adapter following Laravel's Storage interface."""
    
    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a file exists."""
        pass
    
    @abstractmethod
    def get(self, path: str) -> Optional[bytes]:
        """Get file contents."""
        pass
    
    @abstractmethod
    def put(self, path: str, contents: Union[str, bytes]) -> bool:
        """Store file contents."""
        pass
    
    @abstractmethod
    def delete(self, path: str) -> bool:
        """Delete a file."""
        pass
    
    def get_string(self, path: str) -> Optional[str]:
        """Get file contents as string."""
        contents = self.get(path)
        return contents.decode('utf-8') if contents is not None else None
    
    def missing(self, path: str) -> bool:
        """Check if a file is missing."""
        return not self.exists(path)
    
    @staticmethod
    def _to_bytes(contents: Union[str, bytes]) -> bytes:
        if isinstance(contents, str):
            return contents.encode('utf-8')
        return bytes(contents)


class LocalFilesystemAdapter(FilesystemAdapter):
    """Local filesystem adapter."""
    
    def __init__(self, root_path: str = "storage/app") -> None:
        self.root_path = Path(root_path)
        self.root_path.mkdir(parents=True, exist_ok=True)
    
    def _full_path(self, path: str) -> Path:
        """Get full filesystem path."""
        return self.root_path / path.lstrip('/')
    
    def exists(self, path: str) -> bool:
        """Check if a file exists."""
        return self._full_path(path).is_file()
    
    def get(self, path: str) -> Optional[bytes]:
        """Get file contents."""
        try:
            return self._full_path(path).read_bytes()
        except FileNotFoundError:
            return None
    
    def put(self, path: str, contents: Union[str, bytes]) -> bool:
        """Store file contents."""
        full_path = self._full_path(path)
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_bytes(self._to_bytes(contents))
        return True
    
    def delete(self, path: str) -> bool:
        """Delete a file."""
        try:
            self._full_path(path).unlink()
            return True
        except FileNotFoundError:
            return False


class MemoryFilesystemAdapter(FilesystemAdapter):
    """In-memory filesystem adapter (for testing)."""
    
    def __init__(self) -> None:
        self._files: Dict[str, bytes] = {}
        self._lock = threading.Lock()
    
    def exists(self, path: str) -> bool:
        return path.lstrip('/') in self._files
    
    def get(self, path: str) -> Optional[bytes]:
        return self._files.get(path.lstrip('/'))
    
    def put(self, path: str, contents: Union[str, bytes]) -> bool:
        with self._lock:
            self._files[path.lstrip('/')] = self._to_bytes(contents)
        return True
    
    def delete(self, path: str) -> bool:
        with self._lock:
            return self._files.pop(path.lstrip('/'), None) is not None
    
    def __len__(self) -> int:
        return len(self._files)


class StorageManager:
    """Laravel-style storage manager."""
    
    def __init__(self, config: Optional[Dict[str, Dict[str, Any]]] = None, default_disk: Optional[str] = None) -> None:
        self._config = config if config is not None else filesystems.disks
        self.disks: Dict[str, FilesystemAdapter] = {}
        self.default_disk = default_disk or filesystems.default
    
    def disk(self, name: Optional[str] = None) -> FilesystemAdapter:
        """Get a filesystem disk."""
        disk_name = name or self.default_disk
        if disk_name not in self.disks:
            self.disks[disk_name] = self._resolve(disk_name)
        return self.disks[disk_name]
    
    def _resolve(self, name: str) -> FilesystemAdapter:
        config = self._config.get(name)
        if config is None:
            raise ValueError(f"Disk '{name}' not found")
        
        driver = config.get('driver', 'local')
        if driver == 'local':
            return LocalFilesystemAdapter(config.get('root', f"storage/app/{name}"))
        if driver == 'memory':
            return MemoryFilesystemAdapter()
        
        raise ValueError(f"Driver '{driver}' for disk '{name}' is not supported")
    
    def extend(self, name: str, adapter: FilesystemAdapter) -> None:
        """Register a custom filesystem adapter."""
        self.disks[name] = adapter
    
    def forget_disk(self, name: str) -> None:
        """Drop a resolved disk."""
        self.disks.pop(name, None)


# Global storage manager
storage_manager = StorageManager()


def storage(disk: Optional[str] = None) -> FilesystemAdapter:
    """Get storage disk instance."""
    return storage_manager.disk(disk)
