import pytest
from sqlalchemy import create_engine

from expense_ledger.store import ExpenseStore


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'expenses.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return ExpenseStore(engine)
