"""
Shared route dependencies
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.models import Wedding
from app.services.repositories import WeddingRepo
from app.utils.responses import not_found_error

def get_wedding(wedding_id: int, db: Session = Depends(get_db)) -> Wedding:
    """Resolve the wedding from the path or fail with 404"""
    wedding = WeddingRepo.get_by_id(db, wedding_id)
    if not wedding:
        raise not_found_error("Wedding")
    return wedding
