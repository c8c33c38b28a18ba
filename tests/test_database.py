"""Tests for engine construction and schema creation."""

from sqlalchemy import inspect

from biblioteca.database import build_engine, init_db


def test_init_db_creates_users_table():
    engine = build_engine("sqlite://")

    init_db(bind=engine)

    inspector = inspect(engine)
    assert "users" in inspector.get_table_names()
    columns = {column["name"] for column in inspector.get_columns("users")}
    assert columns == {
        "id",
        "name",
        "email",
        "password_hash",
        "created_at",
        "updated_at",
        "deleted_at",
    }
    unique_indexes = [idx for idx in inspector.get_indexes("users") if idx["unique"]]
    assert [idx["column_names"] for idx in unique_indexes] == [["email"]]


def test_init_db_is_repeatable():
    engine = build_engine("sqlite://")

    init_db(bind=engine)
    init_db(bind=engine)

    assert inspect(engine).get_table_names() == ["users"]
