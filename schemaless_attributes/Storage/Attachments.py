from __future__ import annotations

import logging
from typing import Any, List, Optional, Type, Union

from sqlalchemy import event, inspect
from sqlalchemy.orm import Session

from .Blob import Blob

logger = logging.getLogger(__name__)


class AttachedOne:
    """
    Single blob attachment of an owner instance.
    
    The owner keeps the blob key in a plain member (usually a string column);
    attaching a new blob replaces and purges the previous one. When the owner
    belongs to a SQLAlchemy session, the purge waits for the session to
    commit and is dropped on rollback, so the stored key never outlives its
    blob.
    """
    
    def __init__(self, owner: Any, name: str, key_member: str, disk: Optional[str] = None) -> None:
        self.owner = owner
        self.name = name
        self.key_member = key_member
        self.disk = disk
    
    @property
    def key(self) -> Optional[str]:
        return getattr(self.owner, self.key_member, None)
    
    @property
    def blob(self) -> Optional[Blob]:
        key = self.key
        if not key:
            return None
        return Blob.from_key(key, self.disk)
    
    def is_attached(self) -> bool:
        """Check if a blob is attached."""
        return bool(self.key)
    
    def download(self) -> bytes:
        """Download the attached blob."""
        blob = self.blob
        if blob is None:
            raise FileNotFoundError(f"Nothing attached to {type(self.owner).__name__}.{self.name}")
        return blob.download()
    
    def attach(self, blob: Blob) -> None:
        """Attach an uploaded blob, replacing the current one."""
        previous = self.blob
        setattr(self.owner, self.key_member, blob.key)
        logger.debug(f"Attached blob {blob.key} to {type(self.owner).__name__}.{self.name}")
        
        if previous is not None and previous.key != blob.key:
            purge_later(self.owner, previous)
    
    def attach_new(self, data: bytes, filename: str, content_type: Optional[str] = None) -> Blob:
        """Upload data as a new blob and attach it."""
        blob = Blob.create_and_upload(data, filename, disk=self.disk, content_type=content_type)
        self.attach(blob)
        return blob
    
    def detach(self) -> None:
        """Purge the attached blob and clear the owner key."""
        previous = self.blob
        setattr(self.owner, self.key_member, None)
        
        if previous is not None:
            logger.debug(f"Detached blob {previous.key} from {type(self.owner).__name__}.{self.name}")
            purge_later(self.owner, previous)
    
    def __bool__(self) -> bool:
        return self.is_attached()
    
    def __repr__(self) -> str:
        return f"<AttachedOne {self.name} key={self.key!r}>"


class HasOneAttached:
    """Descriptor exposing an AttachedOne proxy for each owner instance."""
    
    def __init__(self, key_member: str, disk: Optional[str] = None) -> None:
        self.key_member = key_member
        self.disk = disk
        self.name = key_member
    
    def __set_name__(self, owner: Type[Any], name: str) -> None:
        self.name = name
    
    def __get__(self, instance: Any, owner: Optional[Type[Any]] = None) -> Any:
        if instance is None:
            return self
        return AttachedOne(instance, self.name, self.key_member, self.disk)
    
    def __set__(self, instance: Any, value: Union[Blob, bytes, None]) -> None:
        attached = AttachedOne(instance, self.name, self.key_member, self.disk)
        
        if value is None:
            attached.detach()
        elif isinstance(value, Blob):
            attached.attach(value)
        elif isinstance(value, (bytes, bytearray)):
            attached.attach_new(bytes(value), self.name)
        else:
            raise TypeError(f"Cannot attach {type(value).__name__} to {self.name}")


def has_one_attached(key_member: str, disk: Optional[str] = None) -> HasOneAttached:
    """Declare a single blob attachment whose key lives in ``key_member``."""
    return HasOneAttached(key_member, disk)


PENDING_PURGES_KEY = 'schemaless_pending_purges'


def purge_later(owner: Any, blob: Blob) -> None:
    """Purge a blob once the owner's session commits, or now if the owner has no session."""
    state = inspect(owner, raiseerr=False)
    session = getattr(state, 'session', None)
    
    if session is None:
        blob.purge()
        return
    
    pending: List[Blob] = session.info.setdefault(PENDING_PURGES_KEY, [])
    pending.append(blob)
    logger.debug(f"Purge of blob {blob.key} deferred until commit")


@event.listens_for(Session, 'after_commit')
def purge_after_commit(session: Session) -> None:
    """Purge the blobs released by the committed transaction."""
    for blob in session.info.pop(PENDING_PURGES_KEY, []):
        blob.purge()


@event.listens_for(Session, 'after_soft_rollback')
def keep_blobs_after_rollback(session: Session, previous_transaction: Any) -> None:
    """Forget deferred purges, the rolled back rows still reference their blobs."""
    del previous_transaction  # Unused parameter required by SQLAlchemy
    session.info.pop(PENDING_PURGES_KEY, None)
