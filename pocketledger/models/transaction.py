import enum
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, ForeignKey
from pocketledger.db import Base
from datetime import datetime
from sqlalchemy.orm import relationship

class TransactionType(str, enum.Enum):
    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def parse(cls, value):
        """Accepts income/expense in any case plus the IN/OUT aliases. Returns None otherwise."""
        if not value:
            return None
        normalized = value.strip().lower()
        if normalized in ("in", "income"):
            return cls.INCOME
        if normalized in ("out", "expense"):
            return cls.EXPENSE
        return None

class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)

    type = Column(String(10), nullable=False) # income | expense
    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    note = Column(String) # description

    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    merchant_id = Column(Integer, ForeignKey("merchants.id", ondelete="SET NULL"), nullable=True)
    account_id = Column(Integer, ForeignKey("accounts.id", ondelete="SET NULL"), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", backref="transactions")
    category = relationship("Category", backref="transactions")
    merchant = relationship("Merchant", backref="transactions")
    account = relationship("Account", backref="transactions")
