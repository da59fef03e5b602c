from typing import Optional
from fastapi import APIRouter
from sqlalchemy.orm import Session

from pocketledger.dependencies import DbSession, CurrentUser
from pocketledger.services.dashboard_service import get_dashboard_data
from pocketledger.services.reports_service import get_reports_data

summary_router = APIRouter()

# Dashboard
@summary_router.get("/dashboard")
def dashboard(month: Optional[str] = None, user_id: int = CurrentUser, db: Session = DbSession):
    return get_dashboard_data(db, user_id, month)

# Reports
@summary_router.get("/reports")
def reports(month: Optional[str] = None, user_id: int = CurrentUser, db: Session = DbSession):
    return get_reports_data(db, user_id, month)
