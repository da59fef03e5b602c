from fastapi import APIRouter, Response
from sqlalchemy.orm import Session

from pocketledger.dependencies import DbSession, CurrentUser, PathId
from pocketledger.schemas.finance_schemas import AccountRequest
from pocketledger.services.accounts_service import get_accounts, add_account, edit_account, delete_account

accounts_router = APIRouter(prefix="/accounts")

@accounts_router.get("")
def list_accounts(user_id: int = CurrentUser, db: Session = DbSession):
    return get_accounts(db, user_id)

@accounts_router.post("", status_code=201)
def create_account(req: AccountRequest, user_id: int = CurrentUser, db: Session = DbSession):
    return add_account(db, user_id, req)

@accounts_router.put("/{account_id}")
def update_account(account_id: PathId, req: AccountRequest, user_id: int = CurrentUser, db: Session = DbSession):
    return edit_account(db, user_id, account_id, req)

@accounts_router.delete("/{account_id}", status_code=204)
def remove_account(account_id: PathId, user_id: int = CurrentUser, db: Session = DbSession):
    delete_account(db, user_id, account_id)
    return Response(status_code=204)
