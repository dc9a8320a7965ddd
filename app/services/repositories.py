"""
Repository layer for weddings and guests.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.models import Guest, SeatingTable, Wedding
from app.schemas.guest import GuestCreate, GuestUpdate
from app.schemas.wedding import WeddingCreate


# -------- Wedding repository --------

class WeddingRepo:
    @staticmethod
    def get_by_id(db: Session, wedding_id: int) -> Optional[Wedding]:
        return db.query(Wedding).filter(Wedding.id == wedding_id).first()

    @staticmethod
    def list_all(db: Session) -> List[Wedding]:
        return db.query(Wedding).order_by(Wedding.wedding_date, Wedding.id).all()

    @staticmethod
    def create(db: Session, data: WeddingCreate) -> Wedding:
        values = data.model_dump()
        values["currency"] = values.get("currency") or settings.DEFAULT_CURRENCY
        wedding = Wedding(**values)
        db.add(wedding)
        db.commit()
        db.refresh(wedding)
        return wedding

    @staticmethod
    def counts(db: Session, wedding: Wedding) -> Dict[str, Any]:
        total_guests = db.query(Guest).filter(Guest.wedding_id == wedding.id).count()
        confirmed = db.query(Guest).filter(
            Guest.wedding_id == wedding.id,
            Guest.rsvp_status == "confirmed"
        ).count()
        total_tables = db.query(SeatingTable).filter(SeatingTable.wedding_id == wedding.id).count()
        return {
            "total_guests": total_guests,
            "confirmed_guests": confirmed,
            "total_tables": total_tables,
            "days_until_wedding": wedding.days_until_wedding(),
        }


# -------- Guest repository --------

class GuestRepo:
    @staticmethod
    def get_by_id(db: Session, wedding_id: int, guest_id: int) -> Optional[Guest]:
        return db.query(Guest).filter(
            Guest.id == guest_id,
            Guest.wedding_id == wedding_id
        ).first()

    @staticmethod
    def list_for_wedding(
        db: Session,
        wedding_id: int,
        rsvp_status: Optional[str] = None,
        side: Optional[str] = None
    ) -> List[Guest]:
        query = db.query(Guest).filter(Guest.wedding_id == wedding_id)
        if rsvp_status:
            query = query.filter(Guest.rsvp_status == rsvp_status)
        if side:
            query = query.filter(Guest.side == side)
        return query.order_by(Guest.last_name, Guest.first_name).all()

    @staticmethod
    def create(db: Session, wedding_id: int, data: GuestCreate) -> Guest:
        guest = Guest(wedding_id=wedding_id, **data.model_dump())
        db.add(guest)
        db.commit()
        db.refresh(guest)
        return guest

    @staticmethod
    def update(db: Session, guest: Guest, data: GuestUpdate) -> Guest:
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(guest, field, value)
        db.commit()
        db.refresh(guest)
        return guest
