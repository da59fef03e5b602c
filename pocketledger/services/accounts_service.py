from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from pocketledger.models import Account
from pocketledger.schemas.finance_schemas import AccountRequest
from pocketledger.utils.logger import get_logger

logger = get_logger("pocketledger.accounts")

def serialize_account(account: Account):
    return {
        "id": account.id,
        "name": account.name,
        "createdAt": account.created_at.isoformat() if account.created_at else None,
    }

def get_accounts(db: Session, user_id: int):
    accounts = db.query(Account).filter_by(user_id=user_id).order_by(Account.name.asc()).all()
    return [serialize_account(a) for a in accounts]

def get_owned_account(db: Session, user_id: int, account_id: int):
    return db.query(Account).filter_by(id=account_id, user_id=user_id).first()

def add_account(db: Session, user_id: int, req: AccountRequest):
    account = Account(user_id=user_id, name=req.name)
    db.add(account)
    db.commit()
    db.refresh(account)
    return serialize_account(account)

def edit_account(db: Session, user_id: int, account_id: int, req: AccountRequest):
    account = get_owned_account(db, user_id, account_id)
    if not account:
        raise HTTPException(status_code=404, detail="Account not found")

    account.name = req.name
    db.commit()
    db.refresh(account)
    return serialize_account(account)

def delete_account(db: Session, user_id: int, account_id: int):
    account = get_owned_account(db, user_id, account_id)
    if not account:
        return # nothing of ours to delete

    db.delete(account)
    db.commit()

def get_or_create_account(db: Session, user_id: int, name: str) -> Account:
    """
    Resolve a free-text account name to one of the user's accounts.

    Matching is case-insensitive on the trimmed name. When nothing matches a
    new Account is added to the session (flushed, not committed) so the caller
    commits it together with the transaction that references it.
    """
    name = name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Account name cannot be blank")

    existing = (
        db.query(Account)
        .filter(Account.user_id == user_id)
        .filter(func.lower(Account.name) == name.lower())
        .order_by(Account.id.asc())
        .first()
    )
    if existing:
        return existing

    account = Account(user_id=user_id, name=name)
    db.add(account)
    db.flush()
    logger.info(f"Created account id={account.id} for user id={user_id} from transaction payload")
    return account
