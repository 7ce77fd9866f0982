from datetime import date
from decimal import Decimal

from expense_ledger import display
from expense_ledger.schemas import ExpenseList, ExpenseRead


def make_expense(id, amount, memo, created_on=date(2024, 5, 1)):
    return ExpenseRead(id=id, amount=Decimal(amount), memo=memo, created_on=created_on)


def test_count_line_wording():
    assert display.count_line(0) == "There are no expenses"
    assert display.count_line(1) == "There is 1 expense."
    assert display.count_line(7) == "There are 7 expenses."


def test_row_is_fixed_width():
    line = display.format_expense(make_expense(4, "1234.5", "Rent deposit"))

    assert line == "  4 2024-05-01      1234.50 Rent deposit"
    assert line.index("Rent") == 3 + 1 + 10 + 1 + 12 + 1


def test_listing_appends_total_only_for_several_rows(capsys):
    display.display_listing(ExpenseList.from_rows([make_expense(1, "10.00", "Lunch")]))
    single = capsys.readouterr().out.splitlines()

    display.display_listing(
        ExpenseList.from_rows(
            [make_expense(1, "10.00", "Lunch"), make_expense(2, "0.5", "Gum")]
        )
    )
    several = capsys.readouterr().out.splitlines()

    assert len(single) == 2
    assert several[-2] == "-" * 50
    assert several[-1] == "Total" + "10.50".rjust(30)
