from typing import Optional

from fastapi import HTTPException
from sqlalchemy import desc
from sqlalchemy.orm import Session, joinedload

from pocketledger.models import Account, Transaction, TransactionType
from pocketledger.schemas.finance_schemas import MAX_ID, TransactionRequest
from pocketledger.services.accounts_service import get_owned_account, get_or_create_account
from pocketledger.services.categories_service import get_owned_category
from pocketledger.services.merchants_service import get_owned_merchant
from pocketledger.utils.dates import current_month, get_month_range, parse_date

def serialize_transaction(t: Transaction):
    return {
        "id": t.id,
        "description": t.note or "",
        "amount": float(t.amount),
        "type": t.type,
        "categoryId": t.category_id,
        "categoryName": t.category.name if t.category else None,
        "merchantId": t.merchant_id,
        "merchantName": t.merchant.name if t.merchant else None,
        "accountId": t.account_id,
        "account": t.account.name if t.account else None,
        "date": t.date.isoformat(),
    }

def normalize_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None

def parse_optional_id(value: Optional[str]) -> Optional[int]:
    value = normalize_optional(value)
    if value is None:
        return None
    try:
        parsed = int(value)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid query")
    if not 1 <= parsed <= MAX_ID:
        raise HTTPException(status_code=400, detail="Invalid query")
    return parsed

def month_range_or_400(month: Optional[str]):
    month = normalize_optional(month) or current_month()
    try:
        start, end = get_month_range(month)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return month, start, end

def get_transactions(
    db: Session,
    user_id: int,
    month: Optional[str] = None,
    type: Optional[str] = None,
    category_id: Optional[str] = None,
    merchant_id: Optional[str] = None,
    account_id: Optional[str] = None,
    account: Optional[str] = None,
    search: Optional[str] = None,
):
    _, start, end = month_range_or_400(month)

    query = (
        db.query(Transaction)
        .options(joinedload(Transaction.category), joinedload(Transaction.merchant), joinedload(Transaction.account))
        .filter(Transaction.user_id == user_id)
        .filter(Transaction.date >= start, Transaction.date < end)
    )

    # An unrecognised type is ignored rather than rejected
    transaction_type = TransactionType.parse(type)
    if transaction_type:
        query = query.filter(Transaction.type == transaction_type.value)

    category_id = parse_optional_id(category_id)
    if category_id is not None:
        query = query.filter(Transaction.category_id == category_id)

    merchant_id = parse_optional_id(merchant_id)
    if merchant_id is not None:
        query = query.filter(Transaction.merchant_id == merchant_id)

    account_id = parse_optional_id(account_id)
    account = normalize_optional(account)
    if account_id is not None:
        query = query.filter(Transaction.account_id == account_id)
    elif account:
        query = query.join(Account, Transaction.account_id == Account.id).filter(Account.name.icontains(account, autoescape=True))

    search = normalize_optional(search)
    if search:
        query = query.filter(Transaction.note.icontains(search, autoescape=True))

    transactions = query.order_by(
        desc(Transaction.date), desc(Transaction.created_at), desc(Transaction.id)
    ).all()
    return [serialize_transaction(t) for t in transactions]

def resolve_references(db: Session, user_id: int, req: TransactionRequest):
    """
    Validates every reference in the payload against the user's own rows.

    Unknown or foreign ids are rejected with 400; a free-text account name is
    resolved (or created) only when no accountId is given.
    """
    transaction_type = TransactionType.parse(req.type)
    if not transaction_type:
        raise HTTPException(status_code=400, detail="Invalid transaction type")

    try:
        transaction_date = parse_date(req.date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if req.category_id is not None:
        category = get_owned_category(db, user_id, req.category_id)
        if not category:
            raise HTTPException(status_code=400, detail="Invalid category")
        if category.type != transaction_type.value:
            raise HTTPException(status_code=400, detail="Category type does not match transaction type")

    if req.merchant_id is not None and not get_owned_merchant(db, user_id, req.merchant_id):
        raise HTTPException(status_code=400, detail="Invalid merchant")

    account_id = None
    if req.account_id is not None:
        if not get_owned_account(db, user_id, req.account_id):
            raise HTTPException(status_code=400, detail="Invalid account")
        account_id = req.account_id
    elif req.account:
        account_id = get_or_create_account(db, user_id, req.account).id

    return {
        "type": transaction_type.value,
        "amount": req.amount,
        "date": transaction_date,
        "note": req.description.strip(),
        "category_id": req.category_id,
        "merchant_id": req.merchant_id,
        "account_id": account_id,
    }

def add_transaction(db: Session, user_id: int, req: TransactionRequest):
    values = resolve_references(db, user_id, req)

    transaction = Transaction(user_id=user_id, **values)
    db.add(transaction)
    db.commit()
    db.refresh(transaction)
    return serialize_transaction(transaction)

def edit_transaction(db: Session, user_id: int, transaction_id: int, req: TransactionRequest):
    transaction = db.query(Transaction).filter_by(id=transaction_id, user_id=user_id).first()
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")

    values = resolve_references(db, user_id, req)
    for key, value in values.items():
        setattr(transaction, key, value)

    db.commit()
    db.refresh(transaction)
    return serialize_transaction(transaction)

def delete_transaction(db: Session, user_id: int, transaction_id: int):
    db.query(Transaction).filter_by(id=transaction_id, user_id=user_id).delete(synchronize_session=False)
    db.commit()
