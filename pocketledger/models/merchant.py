from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from pocketledger.db import Base
from datetime import datetime
from sqlalchemy.orm import relationship

class Merchant(Base):
    __tablename__ = "merchants"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    name = Column(String, nullable=False)
    note = Column(String, nullable=True) # free-text category tag

    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", backref="merchants")
