"""
Seating chart API routes
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_wedding
from app.core.db import get_db
from app.models import Wedding
from app.models.table import TABLE_SHAPES
from app.schemas.guest import GuestResponse
from app.schemas.seating import (
    AssignGuestRequest,
    AutoAssignRequest,
    PositionsUpdate,
    TableCreate,
    TableResponse,
    TableUpdate,
)
from app.services.repositories import GuestRepo
from app.services.seating_service import SeatingService
from app.utils.responses import success_response, error_response, not_found_error

router = APIRouter()

def _table_or_404(wedding: Wedding, table_id: int, db: Session):
    table = SeatingService.get_table(wedding.id, table_id, db)
    if not table:
        raise not_found_error("Table")
    return table

def _guest_or_404(wedding: Wedding, guest_id: int, db: Session):
    guest = GuestRepo.get_by_id(db, wedding.id, guest_id)
    if not guest:
        raise not_found_error("Guest")
    return guest

@router.get("")
async def get_seating(
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    """Seating overview: tables, unassigned confirmed guests and totals"""
    overview = SeatingService.get_seating_overview(wedding.id, db)
    
    return success_response(
        message="Seating retrieved successfully",
        data={
            "tables": [TableResponse.model_validate(table) for table in overview["tables"]],
            "unassigned_guests": [
                GuestResponse.model_validate(guest) for guest in overview["unassigned_guests"]
            ],
            "stats": overview["stats"],
            "shapes": TABLE_SHAPES,
        }
    )

@router.post("/tables")
async def create_table(
    table_data: TableCreate,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    """Add a table at the end of the display order"""
    table = SeatingService.create_table(wedding.id, table_data, db)
    
    return success_response(
        message="Table added!",
        data=TableResponse.model_validate(table),
        status_code=201
    )

@router.patch("/tables/{table_id}")
async def update_table(
    table_id: int,
    table_update: TableUpdate,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    table = _table_or_404(wedding, table_id, db)
    
    if table_update.capacity is not None and table_update.capacity < table.seats_filled:
        return error_response(
            message=f"Table already seats {table.seats_filled} guests",
            error_code="capacity_below_occupancy",
            status_code=422
        )
    
    table = SeatingService.update_table(table, table_update, db)
    
    return success_response(
        message="Table updated!",
        data=TableResponse.model_validate(table)
    )

@router.delete("/tables/{table_id}")
async def delete_table(
    table_id: int,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    """Remove a table and unseat its guests"""
    table = _table_or_404(wedding, table_id, db)
    unseated = SeatingService.delete_table(table, db)
    
    return success_response(
        message="Table removed!",
        data={"deleted_table_id": table_id, "unseated_guests": unseated}
    )

@router.post("/tables/{table_id}/assign")
async def assign_guest(
    table_id: int,
    assignment: AssignGuestRequest,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    """Seat a single guest at a table"""
    table = _table_or_404(wedding, table_id, db)
    guest = _guest_or_404(wedding, assignment.guest_id, db)
    
    if not SeatingService.assign_guest(table, guest, assignment.seat_number, db):
        return error_response(
            message="Table is full!",
            error_code="table_full",
            status_code=422
        )
    
    return success_response(
        message="Guest assigned to table!",
        data=GuestResponse.model_validate(guest)
    )

@router.delete("/guests/{guest_id}/unassign")
async def unassign_guest(
    guest_id: int,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    guest = _guest_or_404(wedding, guest_id, db)
    SeatingService.unassign_guest(guest, db)
    
    return success_response(
        message="Guest removed from table!",
        data=GuestResponse.model_validate(guest)
    )

@router.post("/auto-assign")
async def auto_assign(
    request: AutoAssignRequest,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    """Fill free seats with unseated confirmed guests"""
    result = SeatingService.auto_assign(wedding.id, request.strategy, db, seed=request.seed)
    
    return success_response(
        message="Guests auto-assigned to tables!",
        data={
            "assignments": [
                {"guest_id": guest_id, "table_id": table_id}
                for guest_id, table_id in result.assignments
            ],
            "assigned_count": result.assigned_count,
            "unassigned_count": result.unassigned_count,
        }
    )

@router.patch("/positions")
async def update_positions(
    positions: PositionsUpdate,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    """Save table positions from the seating chart"""
    updated = SeatingService.update_positions(wedding.id, positions.tables, db)
    
    return success_response(
        message="Table positions saved!",
        data={"updated": updated}
    )
