from fastapi import APIRouter, Response
from sqlalchemy.orm import Session

from pocketledger.dependencies import DbSession, CurrentUser, PathId
from pocketledger.schemas.finance_schemas import MerchantRequest
from pocketledger.services.merchants_service import get_merchants, add_merchant, edit_merchant, delete_merchant

merchants_router = APIRouter(prefix="/merchants")

@merchants_router.get("")
def list_merchants(user_id: int = CurrentUser, db: Session = DbSession):
    return get_merchants(db, user_id)

@merchants_router.post("", status_code=201)
def create_merchant(req: MerchantRequest, user_id: int = CurrentUser, db: Session = DbSession):
    return add_merchant(db, user_id, req)

@merchants_router.put("/{merchant_id}")
def update_merchant(merchant_id: PathId, req: MerchantRequest, user_id: int = CurrentUser, db: Session = DbSession):
    return edit_merchant(db, user_id, merchant_id, req)

@merchants_router.delete("/{merchant_id}", status_code=204)
def remove_merchant(merchant_id: PathId, user_id: int = CurrentUser, db: Session = DbSession):
    delete_merchant(db, user_id, merchant_id)
    return Response(status_code=204)
