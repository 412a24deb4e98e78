from __future__ import annotations

import os


class Settings:
    # Raise InvalidSourceType when a source does not provide the declared capability
    SCHEMALESS_STRICT_SOURCES: bool = os.getenv("SCHEMALESS_STRICT_SOURCES", "true").lower() == "true"
    
    # Attachments
    SCHEMALESS_ATTACHMENT_DISK: str = os.getenv("SCHEMALESS_ATTACHMENT_DISK", "local")
    SCHEMALESS_ATTACHMENT_EXTENSION: str = os.getenv("SCHEMALESS_ATTACHMENT_EXTENSION", ".txt")


settings = Settings()
