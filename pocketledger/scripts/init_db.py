# creates database schema
from pocketledger.db import Base, engine
from pocketledger.models import User, Account, Category, Merchant, Transaction

# # Drop all tables
# Base.metadata.drop_all(engine)

# Create tables based on existing models
Base.metadata.create_all(bind=engine)
print("Database schema created.")
