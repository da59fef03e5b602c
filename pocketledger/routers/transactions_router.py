from typing import Optional
from fastapi import APIRouter, Query, Response
from sqlalchemy.orm import Session

from pocketledger.dependencies import DbSession, CurrentUser, PathId
from pocketledger.schemas.finance_schemas import TransactionRequest
from pocketledger.services.transactions_service import get_transactions, add_transaction, edit_transaction, delete_transaction

transactions_router = APIRouter(prefix="/transactions")

@transactions_router.get("")
def list_transactions(
    month: Optional[str] = None,
    type: Optional[str] = None,
    category_id: Optional[str] = Query(None, alias="categoryId"),
    merchant_id: Optional[str] = Query(None, alias="merchantId"),
    account_id: Optional[str] = Query(None, alias="accountId"),
    account: Optional[str] = None,
    q: Optional[str] = None,
    search: Optional[str] = None,
    user_id: int = CurrentUser,
    db: Session = DbSession,
):
    return get_transactions(
        db,
        user_id,
        month=month,
        type=type,
        category_id=category_id,
        merchant_id=merchant_id,
        account_id=account_id,
        account=account,
        search=q if q and q.strip() else search,
    )

@transactions_router.post("", status_code=201)
def create_transaction(req: TransactionRequest, user_id: int = CurrentUser, db: Session = DbSession):
    return add_transaction(db, user_id, req)

@transactions_router.put("/{transaction_id}")
def update_transaction(transaction_id: PathId, req: TransactionRequest, user_id: int = CurrentUser, db: Session = DbSession):
    return edit_transaction(db, user_id, transaction_id, req)

@transactions_router.delete("/{transaction_id}", status_code=204)
def remove_transaction(transaction_id: PathId, user_id: int = CurrentUser, db: Session = DbSession):
    delete_transaction(db, user_id, transaction_id)
    return Response(status_code=204)
