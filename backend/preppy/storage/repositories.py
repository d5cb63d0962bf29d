
from sqlmodel import Session, select

from preppy.logging import get_logger
from preppy.storage.models import StoredDocument, utc_now

logger = get_logger(__name__)


def _get_document(session: Session, key: str) -> StoredDocument | None:
    return session.exec(select(StoredDocument).where(StoredDocument.key == key)).first()


def load_text(session: Session, key: str) -> str:
    """Persisted text for `key`, or "" when nothing was saved yet."""
    document = _get_document(session, key)
    if document is None:
        return ""
    return document.content


def save_text(session: Session, key: str, text: str) -> StoredDocument:
    document = _get_document(session, key)
    if document is None:
        document = StoredDocument(key=key, content=text)
    else:
        document.content = text
        document.updated_at = utc_now()
    session.add(document)
    session.commit()
    session.refresh(document)
    logger.info("document.saved key=%s length=%s", key, len(text))
    return document
