import pytest
from sqlalchemy import create_engine, inspect, text

from finance_tracker import database


def test_open_adds_missing_columns(tmp_path):
    db_file = tmp_path / "old.db"
    engine = create_engine(f"sqlite:///{db_file}")
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE TABLE transactions ("
            "id INTEGER PRIMARY KEY, description VARCHAR(255) NOT NULL, "
            "amount_cents INTEGER NOT NULL, transaction_date DATE NOT NULL, "
            "type VARCHAR(7) NOT NULL, recurring BOOLEAN NOT NULL, "
            "category_id INTEGER NOT NULL, "
            "created_at DATETIME, updated_at DATETIME)"
        ))
    engine.dispose()

    database.open_database(f"sqlite:///{db_file}")
    try:
        columns = {c["name"] for c in inspect(database._current_engine).get_columns("transactions")}
        assert {"installments", "current_installment", "notes"} <= columns
        assert inspect(database._current_engine).has_table("categories")
    finally:
        database.close_database()


def test_session_requires_open_database():
    database.close_database()
    assert not database.is_database_open()
    with pytest.raises(RuntimeError):
        database.get_session()
