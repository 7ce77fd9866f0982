from datetime import date

from sqlalchemy import Column, Integer, Text, Date, DECIMAL

from .database import Base


class Expense(Base):
    __tablename__ = "expenses"
    # ids are never handed out twice, even after deletes
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    amount = Column(DECIMAL(10, 2), nullable=False)   # Never use float for money
    memo = Column(Text, nullable=False)
    created_on = Column(Date, nullable=False, default=date.today)
