from pydantic import BaseModel, Field, field_validator
from decimal import Decimal
from datetime import date
from typing import Optional


class ExpenseCreate(BaseModel):
    amount: Decimal = Field(..., max_digits=10, decimal_places=2)
    memo: str = Field(..., min_length=1)
    created_on: Optional[date] = None

    @field_validator("amount", mode="before")
    @classmethod
    def strip_amount(cls, v):
        if isinstance(v, str):
            v = v.strip()
        return v

    @field_validator("created_on", mode="before")
    @classmethod
    def blank_date_means_today(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ExpenseRead(BaseModel):
    id: int
    amount: Decimal
    memo: str
    created_on: date

    model_config = {"from_attributes": True}


class ExpenseList(BaseModel):
    expenses: list[ExpenseRead]
    total: Decimal
    count: int

    @classmethod
    def from_rows(cls, rows) -> "ExpenseList":
        expenses = [ExpenseRead.model_validate(r) for r in rows]
        total = sum((e.amount for e in expenses), Decimal("0.00"))
        return cls(expenses=expenses, total=total, count=len(expenses))
