"""
Budget tracking and payment recording service
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func

from app.models import BudgetCategory, BudgetItem, Wedding
from app.models.budget import DEFAULT_CATEGORIES
from app.schemas.budget import CategoryCreate, CategoryUpdate, ItemCreate, ItemUpdate
from app.services.payment_state import PaymentState, calculate_payment_state

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

def _sum(values) -> Decimal:
    return sum((value or ZERO for value in values), ZERO)

class BudgetService:
    """Service for budget categories, items and payments"""

    @staticmethod
    def get_category(wedding_id: int, category_id: int, db: Session) -> Optional[BudgetCategory]:
        return db.query(BudgetCategory).filter(
            BudgetCategory.id == category_id,
            BudgetCategory.wedding_id == wedding_id
        ).first()

    @staticmethod
    def get_item(wedding_id: int, item_id: int, db: Session) -> Optional[BudgetItem]:
        return db.query(BudgetItem).filter(
            BudgetItem.id == item_id,
            BudgetItem.wedding_id == wedding_id
        ).first()

    @staticmethod
    def list_categories(wedding_id: int, db: Session) -> List[BudgetCategory]:
        return db.query(BudgetCategory).filter(
            BudgetCategory.wedding_id == wedding_id
        ).order_by(BudgetCategory.order, BudgetCategory.id).all()

    @staticmethod
    def get_budget_overview(wedding: Wedding, db: Session) -> Dict:
        """Categories with items and sums, plus wedding-wide totals"""
        categories = []
        for category in BudgetService.list_categories(wedding.id, db):
            items = sorted(category.items, key=lambda item: item.name)
            categories.append({
                "category": category,
                "items": items,
                "items_sum_estimated_cost": _sum(item.estimated_cost for item in items),
                "items_sum_actual_cost": _sum(item.actual_cost for item in items),
                "items_sum_paid_amount": _sum(item.paid_amount for item in items),
            })

        return {
            "categories": categories,
            "summary": BudgetService.get_summary(wedding, db),
        }

    @staticmethod
    def get_summary(wedding: Wedding, db: Session) -> Dict:
        totals = db.query(
            func.coalesce(func.sum(BudgetItem.estimated_cost), 0),
            func.coalesce(func.sum(BudgetItem.actual_cost), 0),
            func.coalesce(func.sum(BudgetItem.paid_amount), 0)
        ).filter(BudgetItem.wedding_id == wedding.id).one()

        total_estimated, total_actual, total_paid = (Decimal(str(value)) for value in totals)
        total_budget = wedding.total_budget or ZERO

        return {
            "total_budget": total_budget,
            "total_estimated": total_estimated,
            "total_actual": total_actual,
            "total_paid": total_paid,
            "remaining": total_budget - total_actual,
        }

    @staticmethod
    def create_category(wedding_id: int, category_data: CategoryCreate, db: Session) -> BudgetCategory:
        max_order = db.query(func.max(BudgetCategory.order)).filter(
            BudgetCategory.wedding_id == wedding_id
        ).scalar() or 0

        category = BudgetCategory(
            wedding_id=wedding_id,
            order=max_order + 1,
            **category_data.model_dump()
        )
        db.add(category)
        db.commit()
        db.refresh(category)
        return category

    @staticmethod
    def create_default_categories(wedding: Wedding, db: Session) -> List[BudgetCategory]:
        """Seed the stock categories; a wedding that already has categories is left alone"""
        if BudgetService.list_categories(wedding.id, db):
            return []

        created = []
        for defaults in DEFAULT_CATEGORIES:
            estimated = ZERO
            if wedding.total_budget:
                estimated = wedding.total_budget * defaults["percentage"] / 100
            category = BudgetCategory(wedding_id=wedding.id, estimated_amount=estimated, **defaults)
            db.add(category)
            created.append(category)
        db.commit()
        return created

    @staticmethod
    def update_category(category: BudgetCategory, category_update: CategoryUpdate, db: Session) -> BudgetCategory:
        for field, value in category_update.model_dump(exclude_unset=True).items():
            setattr(category, field, value)
        db.commit()
        db.refresh(category)
        return category

    @staticmethod
    def delete_category(category: BudgetCategory, db: Session) -> None:
        db.delete(category)
        db.commit()

    @staticmethod
    def create_item(wedding_id: int, item_data: ItemCreate, db: Session) -> BudgetItem:
        item = BudgetItem(wedding_id=wedding_id, **item_data.model_dump())
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    @staticmethod
    def update_item(item: BudgetItem, item_update: ItemUpdate, db: Session) -> BudgetItem:
        for field, value in item_update.model_dump(exclude_unset=True).items():
            setattr(item, field, value)
        db.commit()
        db.refresh(item)
        return item

    @staticmethod
    def delete_item(item: BudgetItem, db: Session) -> None:
        db.delete(item)
        db.commit()

    @staticmethod
    def record_payment(
        item: BudgetItem,
        amount: Decimal,
        db: Session,
        payment_method: Optional[str] = None,
        notes: Optional[str] = None,
        today: Optional[date] = None
    ) -> PaymentState:
        """Add a payment to an item and persist the derived payment state"""
        state = calculate_payment_state(
            current_paid_amount=item.paid_amount,
            payment_amount=amount,
            actual_cost=item.actual_cost,
            estimated_cost=item.estimated_cost,
            today=today
        )

        item.paid_amount = state.new_paid_amount
        item.payment_status = state.payment_status
        item.is_paid = state.is_paid
        item.paid_date = state.paid_date
        item.payment_method = payment_method
        if notes:
            item.notes = f"{item.notes}\n{notes}" if item.notes else notes

        db.commit()
        db.refresh(item)

        logger.info(
            f"Recorded payment of {amount} on budget item {item.id}; "
            f"paid {state.new_paid_amount}, status {state.payment_status}"
        )
        return state

    @staticmethod
    def update_total_budget(
        wedding: Wedding,
        total_budget: Decimal,
        recalculate_categories: bool,
        db: Session
    ) -> Wedding:
        """Set the wedding budget and optionally re-derive category estimates from percentages"""
        wedding.total_budget = total_budget

        if recalculate_categories:
            for category in BudgetService.list_categories(wedding.id, db):
                if category.percentage:
                    category.estimated_amount = Decimal(total_budget) * category.percentage / 100

        db.commit()
        db.refresh(wedding)
        return wedding

    @staticmethod
    def get_budget_report(wedding: Wedding, db: Session) -> Dict:
        """Per-category totals and paid amounts grouped by month"""
        categories = [
            {
                "name": category.name,
                "estimated": _sum(item.estimated_cost for item in category.items),
                "actual": _sum(item.actual_cost for item in category.items),
                "paid": _sum(item.paid_amount for item in category.items),
                "items_count": len(category.items),
            }
            for category in BudgetService.list_categories(wedding.id, db)
        ]

        paid_items = db.query(BudgetItem).filter(
            BudgetItem.wedding_id == wedding.id,
            BudgetItem.paid_date.isnot(None)
        ).order_by(BudgetItem.paid_date).all()

        monthly: Dict[str, Decimal] = {}
        for item in paid_items:
            month = item.paid_date.strftime("%Y-%m")
            monthly[month] = monthly.get(month, ZERO) + (item.paid_amount or ZERO)

        summary = BudgetService.get_summary(wedding, db)

        return {
            "categories": categories,
            "monthly_spending": [
                {"month": month, "total": total} for month, total in monthly.items()
            ],
            "summary": {
                "total_budget": summary["total_budget"],
                "total_spent": summary["total_actual"],
                "total_paid": summary["total_paid"],
            },
        }
