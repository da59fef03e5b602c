"""
Month-scoped aggregation queries shared by the dashboard and reports pages.

Every query is filtered by the owning user and the half-open
[start, end) date range of the selected month. Amounts are returned as
floats; sums over an empty set are 0.
"""

from datetime import date
from typing import Optional

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from pocketledger.models import Category, Merchant, Transaction, TransactionType

UNCATEGORIZED = "Uncategorized"
UNKNOWN_MERCHANT = "Unknown merchant"

def in_month(query, user_id: int, start: date, end: date):
    return query.filter(
        Transaction.user_id == user_id,
        Transaction.date >= start,
        Transaction.date < end,
    )

def sum_by_type(db: Session, user_id: int, start: date, end: date, transaction_type: TransactionType) -> float:
    total = in_month(db.query(func.sum(Transaction.amount)), user_id, start, end).filter(
        Transaction.type == transaction_type.value
    ).scalar()
    return float(total or 0)

def get_totals(db: Session, user_id: int, start: date, end: date):
    income = sum_by_type(db, user_id, start, end, TransactionType.INCOME)
    expense = sum_by_type(db, user_id, start, end, TransactionType.EXPENSE)
    return {"income": income, "expense": expense, "balance": income - expense}

def get_daily_trend(db: Session, user_id: int, start: date, end: date):
    """Net (income - expense) per distinct date present in the month, oldest first."""
    signed_amount = case(
        (Transaction.type == TransactionType.INCOME.value, Transaction.amount),
        else_=-Transaction.amount,
    )
    rows = (
        in_month(db.query(Transaction.date, func.sum(signed_amount)), user_id, start, end)
        .group_by(Transaction.date)
        .order_by(Transaction.date.asc())
        .all()
    )
    return [{"date": day.isoformat(), "value": float(value or 0)} for day, value in rows]

def rank_expenses(db: Session, user_id: int, start: date, end: date, group_column, name_model, placeholder: str, limit: Optional[int] = None):
    """
    Sums expense amounts per non-null reference and ranks them descending.

    Ties are broken by the referenced id so the order is stable. Names are
    looked up afterwards; a reference whose row is gone gets the placeholder.
    """
    total = func.sum(Transaction.amount)
    query = (
        in_month(db.query(group_column, total), user_id, start, end)
        .filter(Transaction.type == TransactionType.EXPENSE.value)
        .filter(group_column.isnot(None))
        .group_by(group_column)
        .order_by(total.desc(), group_column.asc())
    )
    if limit is not None:
        query = query.limit(limit)
    groups = query.all()

    ids = [ref_id for ref_id, _ in groups]
    names = {}
    if ids:
        names = dict(db.query(name_model.id, name_model.name).filter(name_model.id.in_(ids)).all())

    return [
        {"id": ref_id, "name": names.get(ref_id, placeholder), "value": float(value or 0)}
        for ref_id, value in groups
    ]

def rank_categories(db: Session, user_id: int, start: date, end: date, limit: Optional[int] = None):
    return rank_expenses(db, user_id, start, end, Transaction.category_id, Category, UNCATEGORIZED, limit)

def rank_merchants(db: Session, user_id: int, start: date, end: date, limit: Optional[int] = None):
    return rank_expenses(db, user_id, start, end, Transaction.merchant_id, Merchant, UNKNOWN_MERCHANT, limit)
