"""
Wedding and guest API routes
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_wedding
from app.core.db import get_db
from app.models import Wedding
from app.schemas.guest import GuestCreate, GuestUpdate, GuestResponse
from app.schemas.wedding import WeddingCreate, WeddingResponse, WeddingDetail
from app.services.repositories import WeddingRepo, GuestRepo
from app.utils.responses import success_response, not_found_error

router = APIRouter()

@router.post("")
async def create_wedding(
    wedding_data: WeddingCreate,
    db: Session = Depends(get_db)
):
    """Create a new wedding"""
    wedding = WeddingRepo.create(db, wedding_data)
    
    return success_response(
        message="Wedding created successfully",
        data=WeddingResponse.model_validate(wedding),
        status_code=201
    )

@router.get("")
async def list_weddings(db: Session = Depends(get_db)):
    """List all weddings"""
    weddings = WeddingRepo.list_all(db)
    
    return success_response(
        message="Weddings retrieved successfully",
        data=[WeddingResponse.model_validate(wedding) for wedding in weddings]
    )

@router.get("/{wedding_id}")
async def get_wedding_details(
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    """Get detailed wedding information"""
    detail = WeddingDetail(
        **WeddingResponse.model_validate(wedding).model_dump(),
        **WeddingRepo.counts(db, wedding)
    )
    
    return success_response(
        message="Wedding details retrieved",
        data=detail
    )

@router.get("/{wedding_id}/guests")
async def list_guests(
    rsvp_status: Optional[str] = Query(None),
    side: Optional[str] = Query(None),
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    """List guests with optional RSVP and side filters"""
    guests = GuestRepo.list_for_wedding(db, wedding.id, rsvp_status=rsvp_status, side=side)
    
    return success_response(
        message="Guests retrieved successfully",
        data=[GuestResponse.model_validate(guest) for guest in guests]
    )

@router.post("/{wedding_id}/guests")
async def create_guest(
    guest_data: GuestCreate,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    """Add a guest to the wedding"""
    guest = GuestRepo.create(db, wedding.id, guest_data)
    
    return success_response(
        message="Guest added successfully",
        data=GuestResponse.model_validate(guest),
        status_code=201
    )

@router.patch("/{wedding_id}/guests/{guest_id}")
async def update_guest(
    guest_id: int,
    guest_update: GuestUpdate,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    """Update guest information"""
    guest = GuestRepo.get_by_id(db, wedding.id, guest_id)
    if not guest:
        raise not_found_error("Guest")
    
    guest = GuestRepo.update(db, guest, guest_update)
    
    return success_response(
        message="Guest updated successfully",
        data=GuestResponse.model_validate(guest)
    )
