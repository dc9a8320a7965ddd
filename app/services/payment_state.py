"""
Payment status derivation for budget items
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

ZERO = Decimal("0")

@dataclass(frozen=True)
class PaymentState:
    new_paid_amount: Decimal
    payment_status: str
    is_paid: bool
    paid_date: Optional[date]

def effective_cost(actual_cost: Optional[Decimal], estimated_cost: Optional[Decimal]) -> Decimal:
    """Actual cost when known, else the estimate, else zero"""
    if actual_cost is not None:
        return Decimal(actual_cost)
    if estimated_cost is not None:
        return Decimal(estimated_cost)
    return ZERO

def calculate_payment_state(
    current_paid_amount: Optional[Decimal],
    payment_amount: Decimal,
    actual_cost: Optional[Decimal] = None,
    estimated_cost: Optional[Decimal] = None,
    today: Optional[date] = None,
) -> PaymentState:
    """Add a payment to an item and derive its paid/partial/pending status.

    The paid amount is never capped at the cost. An item without any cost
    can only reach ``partial``.
    """
    cost = effective_cost(actual_cost, estimated_cost)
    new_paid_amount = Decimal(current_paid_amount or ZERO) + Decimal(payment_amount)

    if cost > ZERO and new_paid_amount >= cost:
        return PaymentState(new_paid_amount, "paid", True, today or date.today())
    if new_paid_amount > ZERO:
        return PaymentState(new_paid_amount, "partial", False, None)
    return PaymentState(new_paid_amount, "pending", False, None)
