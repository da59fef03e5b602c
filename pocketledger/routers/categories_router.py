from fastapi import APIRouter
from sqlalchemy.orm import Session

from pocketledger.dependencies import DbSession, CurrentUser, PathId
from pocketledger.schemas.finance_schemas import CategoryRequest
from pocketledger.services.categories_service import (
    get_categories,
    add_category,
    edit_category,
    archive_category,
    import_default_categories,
)

categories_router = APIRouter(prefix="/categories")

@categories_router.get("")
def list_categories(user_id: int = CurrentUser, db: Session = DbSession):
    return get_categories(db, user_id)

@categories_router.post("", status_code=201)
def create_category(req: CategoryRequest, user_id: int = CurrentUser, db: Session = DbSession):
    return add_category(db, user_id, req)

@categories_router.post("/import-defaults")
def import_defaults(user_id: int = CurrentUser, db: Session = DbSession):
    return import_default_categories(db, user_id)

@categories_router.put("/{category_id}")
def update_category(category_id: PathId, req: CategoryRequest, user_id: int = CurrentUser, db: Session = DbSession):
    return edit_category(db, user_id, category_id, req)

@categories_router.patch("/{category_id}/archive")
def archive(category_id: PathId, user_id: int = CurrentUser, db: Session = DbSession):
    return archive_category(db, user_id, category_id)
