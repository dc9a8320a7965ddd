"""
Database models package
"""

from .wedding import Wedding
from .table import SeatingTable
from .guest import Guest
from .budget import BudgetCategory, BudgetItem

__all__ = ["Wedding", "SeatingTable", "Guest", "BudgetCategory", "BudgetItem"]
