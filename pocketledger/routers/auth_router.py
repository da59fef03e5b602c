from fastapi import APIRouter
from sqlalchemy.orm import Session

from pocketledger.dependencies import DbSession, CurrentUser
from pocketledger.schemas.auth_schemas import RegisterRequest, LoginRequest
from pocketledger.services.auth_service import register_user, login_user, get_profile

auth_router = APIRouter()

@auth_router.post("/auth/register")
def register(req: RegisterRequest, db: Session = DbSession):
    return register_user(db, req)

@auth_router.post("/auth/login")
def login(req: LoginRequest, db: Session = DbSession):
    return login_user(db, req)

@auth_router.get("/me")
def me(user_id: int = CurrentUser, db: Session = DbSession):
    return get_profile(db, user_id)
