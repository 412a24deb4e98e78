from .settings import settings, Settings
from . import filesystems

__all__ = ["settings", "Settings", "filesystems"]
