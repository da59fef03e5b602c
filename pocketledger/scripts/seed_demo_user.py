# python -m pocketledger.scripts.seed_demo_user

from sqlalchemy.orm import Session
from pocketledger.db import Base, engine
from pocketledger.services.demo_service import seed_demo_user

Base.metadata.create_all(bind=engine)

with Session(engine) as session:
    result = seed_demo_user(session)
    if result["created"]:
        print("Seed completed.")
    else:
        print("Demo user already exists.")
