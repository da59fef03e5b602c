from fastapi import HTTPException
from sqlalchemy.orm import Session

from pocketledger.models import Category, TransactionType
from pocketledger.schemas.finance_schemas import CategoryRequest
from pocketledger.utils.logger import get_logger

logger = get_logger("pocketledger.categories")

DEFAULT_CATEGORIES = [
    {"type": TransactionType.EXPENSE, "name": "Food"},
    {"type": TransactionType.EXPENSE, "name": "Housing"},
    {"type": TransactionType.EXPENSE, "name": "Transportation"},
    {"type": TransactionType.EXPENSE, "name": "Health"},
    {"type": TransactionType.EXPENSE, "name": "Education"},
    {"type": TransactionType.EXPENSE, "name": "Leisure"},
    {"type": TransactionType.EXPENSE, "name": "Services"},
    {"type": TransactionType.EXPENSE, "name": "Taxes"},
    {"type": TransactionType.EXPENSE, "name": "Shopping"},
    {"type": TransactionType.INCOME, "name": "Salary"},
    {"type": TransactionType.INCOME, "name": "Freelance"},
    {"type": TransactionType.INCOME, "name": "Investments"},
    {"type": TransactionType.INCOME, "name": "Refunds"},
    {"type": TransactionType.INCOME, "name": "Other income"},
]

def serialize_category(category: Category):
    return {
        "id": category.id,
        "name": category.name,
        "type": category.type,
        "archived": category.archived,
    }

def parse_category_type(value: str) -> TransactionType:
    category_type = TransactionType.parse(value)
    if not category_type:
        raise HTTPException(status_code=400, detail="Invalid category type")
    return category_type

def get_categories(db: Session, user_id: int):
    categories = (
        db.query(Category)
        .filter_by(user_id=user_id)
        .order_by(Category.archived.asc(), Category.name.asc())
        .all()
    )
    return [serialize_category(c) for c in categories]

def get_owned_category(db: Session, user_id: int, category_id: int):
    return db.query(Category).filter_by(id=category_id, user_id=user_id).first()

def add_category(db: Session, user_id: int, req: CategoryRequest):
    category_type = parse_category_type(req.type)

    category = Category(
        user_id=user_id,
        name=req.name,
        type=category_type.value,
        archived=bool(req.archived),
    )
    db.add(category)
    db.commit()
    db.refresh(category)
    return serialize_category(category)

def edit_category(db: Session, user_id: int, category_id: int, req: CategoryRequest):
    category_type = parse_category_type(req.type)

    category = get_owned_category(db, user_id, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")

    category.name = req.name
    category.type = category_type.value
    category.archived = bool(req.archived)

    db.commit()
    db.refresh(category)
    return serialize_category(category)

def archive_category(db: Session, user_id: int, category_id: int):
    category = get_owned_category(db, user_id, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")

    category.archived = True
    db.commit()
    db.refresh(category)
    return serialize_category(category)

def add_default_categories(db: Session, user_id: int) -> int:
    """Adds the default set, skipping (type, name) pairs the user already has. Caller commits."""
    existing = {(c.type, c.name) for c in db.query(Category).filter_by(user_id=user_id).all()}

    created = 0
    for default in DEFAULT_CATEGORIES:
        key = (default["type"].value, default["name"])
        if key in existing:
            continue
        db.add(Category(user_id=user_id, name=default["name"], type=default["type"].value, archived=False))
        created += 1
    return created

def import_default_categories(db: Session, user_id: int):
    created = add_default_categories(db, user_id)
    db.commit()

    logger.info(f"Imported {created} default categories for user id={user_id}")
    return get_categories(db, user_id)
