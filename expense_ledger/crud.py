from datetime import date
from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from .models import Expense
from .schemas import ExpenseCreate


def ensure_schema(db: Session) -> bool:
    """
    Create the expenses table if it does not exist yet.
    Returns True when the table had to be created.
    """
    conn = db.connection()
    if inspect(conn).has_table(Expense.__tablename__):
        return False
    Expense.__table__.create(bind=conn)
    return True


def get_expenses(db: Session) -> list[Expense]:
    """Fetch every expense, oldest first."""
    return db.query(Expense).order_by(Expense.created_on.asc(), Expense.id.asc()).all()


def search_expenses(db: Session, term: str) -> list[Expense]:
    """Expenses whose memo contains `term`, case-insensitively."""
    return (
        db.query(Expense)
        .filter(Expense.memo.ilike(f"%{term}%"))
        .order_by(Expense.created_on.asc(), Expense.id.asc())
        .all()
    )


def get_expense(db: Session, expense_id: int) -> Optional[Expense]:
    return db.query(Expense).filter(Expense.id == expense_id).first()


def create_expense(db: Session, expense_in: ExpenseCreate) -> Expense:
    new_expense = Expense(
        amount=expense_in.amount,
        memo=expense_in.memo,
        created_on=expense_in.created_on or date.today(),
    )
    db.add(new_expense)
    db.flush()
    return new_expense


def delete_expense(db: Session, expense: Expense) -> None:
    db.delete(expense)
    db.flush()


def delete_all_expenses(db: Session) -> int:
    """Remove every expense. Returns the number of rows deleted."""
    return db.query(Expense).delete(synchronize_session=False)
