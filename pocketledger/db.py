from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from pocketledger.config import DATABASE_URL

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, connect_args=connect_args)
sessionlocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    # one session per request
    db = sessionlocal()
    try:
        yield db
    finally:
        db.close()
