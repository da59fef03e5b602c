from fastapi import HTTPException
from sqlalchemy.orm import Session

from pocketledger.models import User
from pocketledger.schemas.auth_schemas import RegisterRequest, LoginRequest
from pocketledger.utils.security import hash_password, verify_password, create_access_token
from pocketledger.utils.logger import get_logger

logger = get_logger("pocketledger.auth")

def normalize_email(email: str) -> str:
    return email.strip().lower()

def register_user(db: Session, req: RegisterRequest):
    email = normalize_email(req.email)

    existing = db.query(User).filter_by(email=email).first()
    if existing:
        raise HTTPException(status_code=409, detail="Email already registered")

    user = User(name=req.name.strip(), email=email, password_hash=hash_password(req.password))
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Registered user id={user.id}")
    return {"accessToken": create_access_token(user.id)}

def login_user(db: Session, req: LoginRequest):
    user = db.query(User).filter_by(email=normalize_email(req.email)).first()
    if not user or not verify_password(req.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return {"accessToken": create_access_token(user.id)}

def get_profile(db: Session, user_id: int):
    user = db.query(User).filter_by(id=user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    return {"id": user.id, "name": user.name, "email": user.email}
