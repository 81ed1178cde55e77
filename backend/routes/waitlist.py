from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.config import get_settings
from db.session import get_db
from models import WaitlistEntry
from schemas.waitlist import WaitlistCreate, WaitlistEntryRead
from services.waitlist import add_to_waitlist, all_waitlists

settings = get_settings()
router = APIRouter(prefix=settings.waitlist_prefix, tags=["waitlist"])
# FastAPI refuses an empty path under an empty prefix.
ROOT_PATH = "" if settings.waitlist_prefix else "/"


@router.get(ROOT_PATH, response_model=list[WaitlistEntryRead])
def list_waitlist(db: Session = Depends(get_db)) -> list[WaitlistEntry]:
    return all_waitlists(db)


@router.post(ROOT_PATH, response_model=WaitlistEntryRead, status_code=status.HTTP_201_CREATED)
def join_waitlist(payload: WaitlistCreate, db: Session = Depends(get_db)) -> WaitlistEntry:
    return add_to_waitlist(db, payload.email)
