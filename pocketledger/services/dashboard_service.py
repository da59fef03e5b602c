from typing import Optional
from sqlalchemy import desc
from sqlalchemy.orm import Session, joinedload

from pocketledger.models import Transaction
from pocketledger.services.aggregation import get_totals, get_daily_trend, rank_categories, rank_merchants, in_month, UNCATEGORIZED
from pocketledger.services.transactions_service import month_range_or_400

TOP_LIMIT = 5
RECENT_LIMIT = 10

# DASHBOARD
def get_dashboard_data(db: Session, user_id: int, month: Optional[str] = None):
    month, start, end = month_range_or_400(month)

    totals = get_totals(db, user_id, start, end)

    recent = (
        in_month(db.query(Transaction).options(joinedload(Transaction.category)), user_id, start, end)
        .order_by(desc(Transaction.date), desc(Transaction.created_at), desc(Transaction.id))
        .limit(RECENT_LIMIT)
        .all()
    )
    recent_transactions = [
        {
            "id": t.id,
            "description": t.note or "",
            "category": t.category.name if t.category else UNCATEGORIZED,
            "amount": float(t.amount),
            "type": t.type,
            "date": t.date.isoformat(),
        }
        for t in recent
    ]

    return {
        "month": month,
        "income": totals["income"],
        "expense": totals["expense"],
        "balance": totals["balance"],
        "trend": get_daily_trend(db, user_id, start, end),
        "topCategories": rank_categories(db, user_id, start, end, limit=TOP_LIMIT),
        "topMerchants": rank_merchants(db, user_id, start, end, limit=TOP_LIMIT),
        "alerts": [],
        "recentTransactions": recent_transactions,
    }
