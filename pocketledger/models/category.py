from sqlalchemy import Column, Integer, String, ForeignKey, Boolean, DateTime
from pocketledger.db import Base
from datetime import datetime
from sqlalchemy.orm import relationship

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    name = Column(String, nullable=False)
    type = Column(String(10), nullable=False) # income | expense
    archived = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", backref="categories")
