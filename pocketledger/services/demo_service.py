from sqlalchemy.orm import Session

from pocketledger.models import User, Account
from pocketledger.services.categories_service import add_default_categories
from pocketledger.utils.security import hash_password
from pocketledger.utils.logger import get_logger

logger = get_logger("pocketledger.demo")

DEMO_USER = {"email": "demo@demo.com", "password": "123456", "name": "Demo"}
DEMO_ACCOUNTS = ["Cash", "Bank"]

def seed_demo_user(db: Session):
    """Creates the demo user with two accounts and the default categories. Safe to run twice."""
    existing = db.query(User).filter_by(email=DEMO_USER["email"]).first()
    if existing:
        logger.info("Demo user already exists")
        return {"created": False, "user_id": existing.id}

    user = User(
        name=DEMO_USER["name"],
        email=DEMO_USER["email"],
        password_hash=hash_password(DEMO_USER["password"]),
    )
    db.add(user)
    db.flush()

    for name in DEMO_ACCOUNTS:
        db.add(Account(user_id=user.id, name=name))
    add_default_categories(db, user.id)

    db.commit()
    logger.info(f"Demo user seeded with id={user.id}")
    return {"created": True, "user_id": user.id}
