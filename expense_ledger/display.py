"""Plain-text rendering of expense result sets."""

from decimal import Decimal

from .schemas import ExpenseList, ExpenseRead

SEPARATOR_WIDTH = 50
TOTAL_WIDTH = 30


def format_amount(amount: Decimal) -> str:
    return f"{Decimal(amount):.2f}"


def format_expense(expense: ExpenseRead) -> str:
    return (
        f"{expense.id:>3} "
        f"{expense.created_on.isoformat():>10} "
        f"{format_amount(expense.amount):>12} "
        f"{expense.memo}"
    )


def count_line(count: int) -> str:
    if count == 0:
        return "There are no expenses"
    if count == 1:
        return "There is 1 expense."
    return f"There are {count} expenses."


def display_count(listing: ExpenseList) -> None:
    print(count_line(listing.count))


def display_expenses(expenses: list[ExpenseRead]) -> None:
    for expense in expenses:
        print(format_expense(expense))


def display_total(listing: ExpenseList) -> None:
    print("-" * SEPARATOR_WIDTH)
    print("Total" + format_amount(listing.total).rjust(TOTAL_WIDTH))


def display_listing(listing: ExpenseList) -> None:
    """Count line, one line per expense, and a total when more than one row is shown."""
    display_count(listing)
    display_expenses(listing.expenses)
    if listing.count > 1:
        display_total(listing)
