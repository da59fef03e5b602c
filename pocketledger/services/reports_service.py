from typing import Optional
from sqlalchemy.orm import Session

from pocketledger.services.aggregation import get_totals, rank_categories, rank_merchants
from pocketledger.services.transactions_service import month_range_or_400

# REPORTS
def get_reports_data(db: Session, user_id: int, month: Optional[str] = None):
    month, start, end = month_range_or_400(month)

    return {
        "month": month,
        **get_totals(db, user_id, start, end),
        "categories": rank_categories(db, user_id, start, end),
        "merchants": rank_merchants(db, user_id, start, end),
    }
