"""
Tests for budget service functionality
"""

import pytest
from datetime import date
from decimal import Decimal
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.db import Base
from app.models import Wedding, BudgetCategory, BudgetItem
from app.schemas.budget import CategoryCreate, ItemCreate, ItemUpdate
from app.services.budget_service import BudgetService

# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite:///./test_budget.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture
def db_session():
    """Create test database session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture
def wedding(db_session):
    """Create a wedding with two categories and three items"""
    wedding = Wedding(
        title="Garden Wedding",
        bride_name="Anna",
        groom_name="Ben",
        total_budget=Decimal("20000.00"),
        currency="USD"
    )
    db_session.add(wedding)
    db_session.flush()
    
    venue = BudgetCategory(wedding_id=wedding.id, name="Venue", percentage=30, order=1)
    catering = BudgetCategory(wedding_id=wedding.id, name="Catering", percentage=25, order=2)
    db_session.add_all([venue, catering])
    db_session.flush()
    
    db_session.add_all([
        BudgetItem(
            wedding_id=wedding.id, budget_category_id=venue.id, name="Hall rental",
            estimated_cost=Decimal("6000.00"), actual_cost=Decimal("5500.00"), paid_amount=Decimal("1000.00"),
            payment_status="partial"
        ),
        BudgetItem(
            wedding_id=wedding.id, budget_category_id=catering.id, name="Dinner",
            estimated_cost=Decimal("4000.00")
        ),
        BudgetItem(
            wedding_id=wedding.id, budget_category_id=catering.id, name="Cake",
            estimated_cost=Decimal("500.00"), actual_cost=Decimal("450.00")
        ),
    ])
    db_session.commit()
    db_session.refresh(wedding)
    return wedding

def item_named(db_session, name):
    return db_session.query(BudgetItem).filter(BudgetItem.name == name).one()

def test_budget_overview(db_session, wedding):
    """Test category ordering, per-category sums and totals"""
    overview = BudgetService.get_budget_overview(wedding, db_session)
    
    names = [entry["category"].name for entry in overview["categories"]]
    assert names == ["Venue", "Catering"]
    
    catering = overview["categories"][1]
    assert [item.name for item in catering["items"]] == ["Cake", "Dinner"]
    assert catering["items_sum_estimated_cost"] == Decimal("4500.00")
    assert catering["items_sum_actual_cost"] == Decimal("450.00")
    
    summary = overview["summary"]
    assert summary["total_budget"] == Decimal("20000.00")
    assert summary["total_estimated"] == Decimal("10500.00")
    assert summary["total_actual"] == Decimal("5950.00")
    assert summary["total_paid"] == Decimal("1000.00")
    assert summary["remaining"] == Decimal("14050.00")

def test_record_payment_completes_item(db_session, wedding):
    """Test that paying the balance marks the item paid"""
    hall = item_named(db_session, "Hall rental")
    
    state = BudgetService.record_payment(
        hall, Decimal("4500.00"), db_session,
        payment_method="bank_transfer", notes="Final installment", today=date(2027, 3, 2)
    )
    
    assert state.payment_status == "paid"
    hall = item_named(db_session, "Hall rental")
    assert hall.paid_amount == Decimal("5500.00")
    assert hall.payment_status == "paid"
    assert hall.is_paid is True
    assert hall.paid_date == date(2027, 3, 2)
    assert hall.payment_method == "bank_transfer"
    assert hall.notes == "Final installment"
    assert hall.balance_due == Decimal("0")

def test_record_payment_against_estimate(db_session, wedding):
    """Test that the estimate is the cost basis when no actual cost is recorded"""
    dinner = item_named(db_session, "Dinner")
    
    BudgetService.record_payment(dinner, Decimal("1000.00"), db_session)
    
    dinner = item_named(db_session, "Dinner")
    assert dinner.payment_status == "partial"
    assert dinner.is_paid is False
    assert dinner.paid_date is None
    assert dinner.balance_due == Decimal("3000.00")

def test_notes_are_appended(db_session, wedding):
    cake = item_named(db_session, "Cake")
    
    BudgetService.record_payment(cake, Decimal("100"), db_session, notes="Deposit")
    BudgetService.record_payment(cake, Decimal("100"), db_session, notes="Second")
    
    assert item_named(db_session, "Cake").notes == "Deposit\nSecond"

def test_update_total_budget_recalculates_categories(db_session, wedding):
    """Test percentage-based category estimates"""
    BudgetService.update_total_budget(wedding, Decimal("30000"), True, db_session)
    
    categories = {category.name: category for category in BudgetService.list_categories(wedding.id, db_session)}
    assert categories["Venue"].estimated_amount == Decimal("9000.00")
    assert categories["Catering"].estimated_amount == Decimal("7500.00")
    assert BudgetService.get_summary(wedding, db_session)["total_budget"] == Decimal("30000.00")

def test_update_total_budget_without_recalculation(db_session, wedding):
    BudgetService.update_total_budget(wedding, Decimal("30000"), False, db_session)
    
    categories = {category.name: category for category in BudgetService.list_categories(wedding.id, db_session)}
    assert categories["Venue"].estimated_amount == Decimal("0")

def test_default_categories_only_seeded_once(db_session):
    wedding = Wedding(title="Fresh", bride_name="C", groom_name="D", total_budget=Decimal("10000"))
    db_session.add(wedding)
    db_session.commit()
    
    created = BudgetService.create_default_categories(wedding, db_session)
    
    assert len(created) == 12
    categories = BudgetService.list_categories(wedding.id, db_session)
    assert categories[0].name == "Venue"
    assert categories[0].estimated_amount == Decimal("3000.00")
    assert BudgetService.create_default_categories(wedding, db_session) == []

def test_create_category_and_item(db_session, wedding):
    category = BudgetService.create_category(wedding.id, CategoryCreate(name="Flowers", percentage=8), db_session)
    assert category.order == 3
    
    item = BudgetService.create_item(
        wedding.id,
        ItemCreate(budget_category_id=category.id, name="Bouquets", estimated_cost=Decimal("350")),
        db_session
    )
    assert item.payment_status == "pending"
    assert item.paid_amount == Decimal("0")
    
    item = BudgetService.update_item(item, ItemUpdate(actual_cost=Decimal("400")), db_session)
    assert item.effective_cost == Decimal("400")
    assert item.estimated_cost == Decimal("350")

def test_delete_category_removes_items(db_session, wedding):
    catering = BudgetService.list_categories(wedding.id, db_session)[1]
    
    BudgetService.delete_category(catering, db_session)
    
    assert db_session.query(BudgetItem).count() == 1

def test_budget_report_groups_spending_by_month(db_session, wedding):
    """Test per-category report and monthly spending"""
    BudgetService.record_payment(item_named(db_session, "Hall rental"), Decimal("4500"), db_session, today=date(2027, 3, 2))
    BudgetService.record_payment(item_named(db_session, "Cake"), Decimal("450"), db_session, today=date(2027, 3, 20))
    BudgetService.record_payment(item_named(db_session, "Dinner"), Decimal("4000"), db_session, today=date(2027, 5, 1))
    
    report = BudgetService.get_budget_report(wedding, db_session)
    
    assert report["categories"][0] == {
        "name": "Venue",
        "estimated": Decimal("6000.00"),
        "actual": Decimal("5500.00"),
        "paid": Decimal("5500.00"),
        "items_count": 1,
    }
    assert report["monthly_spending"] == [
        {"month": "2027-03", "total": Decimal("5950.00")},
        {"month": "2027-05", "total": Decimal("4000.00")},
    ]
    assert report["summary"]["total_paid"] == Decimal("9950.00")
