from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.logging import get_logger
from models import WaitlistEntry

logger = get_logger("services.waitlist")


def add_to_waitlist(db: Session, email: str) -> WaitlistEntry:
    entry = WaitlistEntry(email=email)
    db.add(entry)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("waitlist.insert_failed")
        raise

    db.refresh(entry)
    logger.info("waitlist.added id=%s", entry.id)
    return entry


def all_waitlists(db: Session) -> list[WaitlistEntry]:
    # No ORDER BY: callers get whatever order the database returns.
    return list(db.scalars(select(WaitlistEntry)).all())
