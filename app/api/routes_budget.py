"""
Budget API routes
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_wedding
from app.core.db import get_db
from app.models import Wedding
from app.models.budget import PAYMENT_METHODS, PAYMENT_STATUSES
from app.schemas.budget import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    ItemCreate,
    ItemResponse,
    ItemUpdate,
    PaymentRequest,
    TotalBudgetUpdate,
)
from app.services.budget_service import BudgetService
from app.utils.responses import success_response, error_response, not_found_error

router = APIRouter()

def _category_or_404(wedding: Wedding, category_id: int, db: Session):
    category = BudgetService.get_category(wedding.id, category_id, db)
    if not category:
        raise not_found_error("Budget category")
    return category

def _item_or_404(wedding: Wedding, item_id: int, db: Session):
    item = BudgetService.get_item(wedding.id, item_id, db)
    if not item:
        raise not_found_error("Budget item")
    return item

@router.get("")
async def get_budget(
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    """Budget overview with category sums and wedding totals"""
    overview = BudgetService.get_budget_overview(wedding, db)
    
    categories = []
    for entry in overview["categories"]:
        category = CategoryResponse.model_validate(entry["category"]).model_dump()
        category["items"] = [ItemResponse.model_validate(item) for item in entry["items"]]
        category["items_sum_estimated_cost"] = entry["items_sum_estimated_cost"]
        category["items_sum_actual_cost"] = entry["items_sum_actual_cost"]
        category["items_sum_paid_amount"] = entry["items_sum_paid_amount"]
        categories.append(category)
    
    return success_response(
        message="Budget retrieved successfully",
        data={
            "categories": categories,
            "summary": overview["summary"],
            "payment_statuses": PAYMENT_STATUSES,
            "payment_methods": PAYMENT_METHODS,
        }
    )

@router.post("/categories")
async def create_category(
    category_data: CategoryCreate,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    category = BudgetService.create_category(wedding.id, category_data, db)
    
    return success_response(
        message="Budget category created!",
        data=CategoryResponse.model_validate(category),
        status_code=201
    )

@router.post("/categories/defaults")
async def create_default_categories(
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    """Seed the stock budget categories"""
    created = BudgetService.create_default_categories(wedding, db)
    
    return success_response(
        message=f"{len(created)} budget categories created",
        data=[CategoryResponse.model_validate(category) for category in created],
        status_code=201 if created else 200
    )

@router.patch("/categories/{category_id}")
async def update_category(
    category_id: int,
    category_update: CategoryUpdate,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    category = _category_or_404(wedding, category_id, db)
    category = BudgetService.update_category(category, category_update, db)
    
    return success_response(
        message="Budget category updated!",
        data=CategoryResponse.model_validate(category)
    )

@router.delete("/categories/{category_id}")
async def delete_category(
    category_id: int,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    category = _category_or_404(wedding, category_id, db)
    BudgetService.delete_category(category, db)
    
    return success_response(
        message="Budget category deleted!",
        data={"deleted_category_id": category_id}
    )

@router.post("/items")
async def create_item(
    item_data: ItemCreate,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    if not BudgetService.get_category(wedding.id, item_data.budget_category_id, db):
        return error_response(
            message="Budget category does not belong to this wedding",
            error_code="invalid_category",
            status_code=422
        )
    
    item = BudgetService.create_item(wedding.id, item_data, db)
    
    return success_response(
        message="Budget item added!",
        data=ItemResponse.model_validate(item),
        status_code=201
    )

@router.patch("/items/{item_id}")
async def update_item(
    item_id: int,
    item_update: ItemUpdate,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    item = _item_or_404(wedding, item_id, db)
    
    if item_update.budget_category_id is not None and not BudgetService.get_category(
        wedding.id, item_update.budget_category_id, db
    ):
        return error_response(
            message="Budget category does not belong to this wedding",
            error_code="invalid_category",
            status_code=422
        )
    
    item = BudgetService.update_item(item, item_update, db)
    
    return success_response(
        message="Budget item updated!",
        data=ItemResponse.model_validate(item)
    )

@router.delete("/items/{item_id}")
async def delete_item(
    item_id: int,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    item = _item_or_404(wedding, item_id, db)
    BudgetService.delete_item(item, db)
    
    return success_response(
        message="Budget item deleted!",
        data={"deleted_item_id": item_id}
    )

@router.post("/items/{item_id}/payment")
async def record_payment(
    item_id: int,
    payment: PaymentRequest,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    """Record a payment and update the item's payment status"""
    item = _item_or_404(wedding, item_id, db)
    BudgetService.record_payment(
        item,
        payment.amount,
        db,
        payment_method=payment.payment_method,
        notes=payment.notes
    )
    
    return success_response(
        message="Payment recorded!",
        data=ItemResponse.model_validate(item)
    )

@router.patch("/total")
async def update_total_budget(
    budget_update: TotalBudgetUpdate,
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    """Set the total budget, optionally re-deriving category estimates"""
    wedding = BudgetService.update_total_budget(
        wedding,
        budget_update.total_budget,
        budget_update.recalculate_categories,
        db
    )
    
    return success_response(
        message="Budget updated!",
        data=BudgetService.get_summary(wedding, db)
    )

@router.get("/report")
async def get_budget_report(
    wedding: Wedding = Depends(get_wedding),
    db: Session = Depends(get_db)
):
    report = BudgetService.get_budget_report(wedding, db)
    
    return success_response(
        message="Budget report generated",
        data=report
    )
