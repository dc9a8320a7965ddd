"""
Seating arrangement and validation service
"""

import logging
from typing import List, Dict, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func

from app.models import Guest, SeatingTable
from app.schemas.seating import TableCreate, TableUpdate, TablePosition
from app.services.seat_assigner import (
    AssignmentResult,
    GuestCandidate,
    TableSlot,
    assign_seats,
)

logger = logging.getLogger(__name__)

class SeatingService:
    """Service for seating arrangement operations"""

    @staticmethod
    def get_table(wedding_id: int, table_id: int, db: Session) -> Optional[SeatingTable]:
        return db.query(SeatingTable).filter(
            SeatingTable.id == table_id,
            SeatingTable.wedding_id == wedding_id
        ).first()

    @staticmethod
    def list_tables(wedding_id: int, db: Session) -> List[SeatingTable]:
        return db.query(SeatingTable).filter(
            SeatingTable.wedding_id == wedding_id
        ).order_by(SeatingTable.order, SeatingTable.id).all()

    @staticmethod
    def list_unassigned_guests(wedding_id: int, db: Session) -> List[Guest]:
        """Confirmed guests without a table, in retrieval order"""
        return db.query(Guest).filter(
            Guest.wedding_id == wedding_id,
            Guest.table_id.is_(None),
            Guest.rsvp_status == "confirmed"
        ).order_by(Guest.id).all()

    @staticmethod
    def get_seating_overview(wedding_id: int, db: Session) -> Dict:
        """Tables with their guests, unseated confirmed guests and totals"""
        tables = SeatingService.list_tables(wedding_id, db)
        unassigned = sorted(
            SeatingService.list_unassigned_guests(wedding_id, db),
            key=lambda guest: (guest.last_name, guest.first_name)
        )

        return {
            "tables": tables,
            "unassigned_guests": unassigned,
            "stats": {
                "total_tables": len(tables),
                "total_capacity": sum(table.capacity for table in tables),
                "total_seated": sum(table.seats_filled for table in tables),
                "unassigned_count": len(unassigned),
            }
        }

    @staticmethod
    def create_table(wedding_id: int, table_data: TableCreate, db: Session) -> SeatingTable:
        """Create a table at the end of the display order"""
        max_order = db.query(func.max(SeatingTable.order)).filter(
            SeatingTable.wedding_id == wedding_id
        ).scalar() or 0

        table = SeatingTable(
            wedding_id=wedding_id,
            order=max_order + 1,
            **table_data.model_dump()
        )
        db.add(table)
        db.commit()
        db.refresh(table)
        return table

    @staticmethod
    def update_table(table: SeatingTable, table_update: TableUpdate, db: Session) -> SeatingTable:
        for field, value in table_update.model_dump(exclude_unset=True).items():
            setattr(table, field, value)
        db.commit()
        db.refresh(table)
        return table

    @staticmethod
    def delete_table(table: SeatingTable, db: Session) -> int:
        """Delete a table after unseating its guests; returns the number unseated"""
        unseated = db.query(Guest).filter(Guest.table_id == table.id).update(
            {Guest.table_id: None, Guest.seat_number: None},
            synchronize_session="fetch"
        )
        db.delete(table)
        db.commit()
        return unseated

    @staticmethod
    def validate_table_capacity(
        table: SeatingTable,
        exclude_guest_id: Optional[int],
        db: Session
    ) -> bool:
        """Validate that a table doesn't exceed capacity"""

        query = db.query(func.count(Guest.id)).filter(Guest.table_id == table.id)

        if exclude_guest_id:
            query = query.filter(Guest.id != exclude_guest_id)

        current_count = query.scalar()
        return current_count < table.capacity

    @staticmethod
    def assign_guest(
        table: SeatingTable,
        guest: Guest,
        seat_number: Optional[int],
        db: Session
    ) -> bool:
        """Seat a guest at a table; False when the table is already full"""
        if not SeatingService.validate_table_capacity(table, guest.id, db):
            return False

        guest.table_id = table.id
        guest.seat_number = seat_number
        db.commit()
        db.refresh(guest)
        return True

    @staticmethod
    def unassign_guest(guest: Guest, db: Session) -> None:
        guest.table_id = None
        guest.seat_number = None
        db.commit()

    @staticmethod
    def auto_assign(
        wedding_id: int,
        strategy: str,
        db: Session,
        seed: Optional[int] = None
    ) -> AssignmentResult:
        """Auto-assign unseated confirmed guests and persist the result in one commit"""
        occupancy = dict(
            db.query(Guest.table_id, func.count(Guest.id)).filter(
                Guest.wedding_id == wedding_id,
                Guest.table_id.isnot(None)
            ).group_by(Guest.table_id).all()
        )

        tables = [
            TableSlot(
                id=table.id,
                capacity=table.capacity,
                current_occupancy=occupancy.get(table.id, 0),
                order=table.order or 0
            )
            for table in SeatingService.list_tables(wedding_id, db)
        ]
        guests = SeatingService.list_unassigned_guests(wedding_id, db)
        candidates = [
            GuestCandidate(id=guest.id, group=guest.group, side=guest.side)
            for guest in guests
        ]

        result = assign_seats(tables, candidates, strategy, seed=seed)

        by_id = {guest.id: guest for guest in guests}
        for guest_id, table_id in result.assignments:
            by_id[guest_id].table_id = table_id
        db.commit()

        logger.info(
            f"Auto-assigned {result.assigned_count} guests for wedding {wedding_id} "
            f"using {strategy}; {result.unassigned_count} left unassigned"
        )
        return result

    @staticmethod
    def update_positions(wedding_id: int, positions: List[TablePosition], db: Session) -> int:
        """Save chart coordinates for tables that belong to the wedding"""
        updated = 0
        for position in positions:
            updated += db.query(SeatingTable).filter(
                SeatingTable.id == position.id,
                SeatingTable.wedding_id == wedding_id
            ).update(
                {
                    SeatingTable.position_x: position.position_x,
                    SeatingTable.position_y: position.position_y,
                },
                synchronize_session="fetch"
            )
        db.commit()
        return updated

    @staticmethod
    def get_table_guests(table_id: int, db: Session) -> List[Dict]:
        """Get all guests seated at a table"""

        guests = db.query(Guest).filter(
            Guest.table_id == table_id
        ).order_by(Guest.seat_number, Guest.last_name).all()

        return [
            {
                "id": guest.id,
                "name": guest.full_name,
                "seat_number": guest.seat_number,
                "dietary_restrictions": guest.dietary_restrictions,
                "meal_choice": guest.meal_choice
            }
            for guest in guests
        ]
