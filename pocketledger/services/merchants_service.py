from fastapi import HTTPException
from sqlalchemy.orm import Session

from pocketledger.models import Merchant
from pocketledger.schemas.finance_schemas import MerchantRequest

def serialize_merchant(merchant: Merchant):
    return {
        "id": merchant.id,
        "name": merchant.name,
        "category": merchant.note,
    }

def get_merchants(db: Session, user_id: int):
    merchants = db.query(Merchant).filter_by(user_id=user_id).order_by(Merchant.name.asc()).all()
    return [serialize_merchant(m) for m in merchants]

def get_owned_merchant(db: Session, user_id: int, merchant_id: int):
    return db.query(Merchant).filter_by(id=merchant_id, user_id=user_id).first()

def merchant_note(req: MerchantRequest):
    # "note" wins when both are sent
    return req.note if req.note is not None else req.category

def add_merchant(db: Session, user_id: int, req: MerchantRequest):
    merchant = Merchant(user_id=user_id, name=req.name, note=merchant_note(req))
    db.add(merchant)
    db.commit()
    db.refresh(merchant)
    return serialize_merchant(merchant)

def edit_merchant(db: Session, user_id: int, merchant_id: int, req: MerchantRequest):
    merchant = get_owned_merchant(db, user_id, merchant_id)
    if not merchant:
        raise HTTPException(status_code=404, detail="Merchant not found")

    merchant.name = req.name
    merchant.note = merchant_note(req)
    db.commit()
    db.refresh(merchant)
    return serialize_merchant(merchant)

def delete_merchant(db: Session, user_id: int, merchant_id: int):
    merchant = get_owned_merchant(db, user_id, merchant_id)
    if not merchant:
        return

    db.delete(merchant)
    db.commit()
