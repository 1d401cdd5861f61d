"""Unit tests for Row, Table and Database entities."""

from __future__ import annotations

import pytest

from tabledb.domain.entities import Database, Row, Table
from tabledb.domain.errors import TableExistsError, TableNotFoundError
from tabledb.domain.value_objects import RowId, Value


@pytest.mark.unit
class TestRow:
    """Tests for Row."""

    def test_from_dict_wraps_values(self) -> None:
        row = Row.from_dict({"name": "Alice", "age": 30})
        assert row["name"] == Value.text("Alice")
        assert row["age"] == Value.integer(30)
        assert row.columns == ["name", "age"]

    def test_get_missing_column(self) -> None:
        """A missing column is None for get and KeyError for indexing."""
        row = Row.from_dict({"name": "Alice"})
        assert row.get("age") is None
        assert "age" not in row
        with pytest.raises(KeyError):
            row["age"]

    def test_to_dict_unwraps(self) -> None:
        assert Row.from_dict({"name": "Bob", "age": 45}).to_dict() == {"name": "Bob", "age": 45}

    def test_row_owns_its_data(self) -> None:
        """Changing the source mapping does not change the row."""
        source = {"name": Value.text("Alice")}
        row = Row(source)
        source["name"] = Value.text("Mallory")
        assert row["name"] == Value.text("Alice")

    def test_row_is_read_only(self) -> None:
        row = Row.from_dict({"name": "Alice"})
        with pytest.raises(TypeError):
            row.data["name"] = Value.text("Eve")  # type: ignore[index]

    def test_rejects_non_values(self) -> None:
        with pytest.raises(TypeError):
            Row({"age": 30})  # type: ignore[dict-item]
        with pytest.raises(ValueError):
            Row({"": Value.integer(1)})

    def test_equality_and_hash(self) -> None:
        a = Row.from_dict({"name": "Alice", "age": 30})
        b = Row.from_dict({"age": 30, "name": "Alice"})
        assert a == b
        assert hash(a) == hash(b)
        assert a != Row.from_dict({"name": "Alice", "age": "30"})

    def test_repr(self) -> None:
        assert repr(Row.from_dict({"name": "Bob", "age": 45})) == "Row(name='Bob', age=45)"


@pytest.mark.unit
class TestTable:
    """Tests for Table."""

    @pytest.fixture
    def table(self) -> Table:
        table = Table("users")
        table.insert({"name": "Alice", "age": 30})
        table.insert({"name": "Bob", "age": 45})
        table.insert({"name": "Charlie"})
        return table

    def test_row_ids_strictly_increase(self) -> None:
        """Successive inserts return strictly increasing, unique RowIds."""
        table = Table("t")
        ids = [table.insert({"n": i}) for i in range(20)]
        assert ids == sorted(set(ids))
        assert all(later > earlier for earlier, later in zip(ids, ids[1:]))
        assert table.next_row_id == RowId(20)

    def test_insert_accepts_row(self) -> None:
        table = Table("t")
        row = Row.from_dict({"n": 1})
        row_id = table.insert(row)
        assert table.get(row_id) is row

    def test_get_and_rows(self, table: Table) -> None:
        assert table.get(RowId(1)) == Row.from_dict({"name": "Bob", "age": 45})
        assert table.get(RowId(99)) is None
        assert [r["name"].payload for r in table.rows()] == ["Alice", "Bob", "Charlie"]
        assert len(table) == 3

    def test_create_index_bulk_builds(self, table: Table) -> None:
        """Only rows that have the column are indexed."""
        index = table.create_index("age")
        assert index.entry_count == 2
        assert index.lookup_eq(Value.integer(30)) == [0]
        assert table.has_index("age")
        assert table.get_index("age") is index

    def test_create_index_on_missing_column(self, table: Table) -> None:
        """An index on a column no row has is empty, not an error."""
        index = table.create_index("email")
        assert index.entry_count == 0
        assert len(index) == 0

    def test_insert_maintains_existing_indexes(self, table: Table) -> None:
        table.create_index("age")
        table.create_index("name")
        row_id = table.insert({"name": "Dana", "age": 30})
        no_age = table.insert({"name": "Eve"})
        assert table.get_index("age").lookup_eq(Value.integer(30)) == [0, row_id]
        assert table.get_index("name").lookup_eq(Value.text("Eve")) == [no_age]
        assert table.get_index("age").entry_count == 3

    def test_index_count_matches_rows_with_column(self) -> None:
        """After create_index, entries equal the rows possessing the column."""
        table = Table("t")
        for i in range(30):
            table.insert({"n": i % 7} if i % 3 else {"other": i})
        with_column = sum(1 for row in table.rows() if "n" in row)
        assert table.create_index("n").entry_count == with_column

    def test_create_index_replaces_previous(self, table: Table) -> None:
        first = table.create_index("age")
        table.insert({"age": 50})
        second = table.create_index("age")
        assert second is not first
        assert table.get_index("age") is second
        assert second.entry_count == 3

    def test_drop_index(self, table: Table) -> None:
        table.create_index("age")
        assert table.drop_index("age") is True
        assert table.drop_index("age") is False
        assert not table.has_index("age")
        assert table.indexed_columns == []


@pytest.mark.unit
class TestDatabase:
    """Tests for Database."""

    def test_create_and_get_table(self) -> None:
        db = Database()
        table = db.create_table("users")
        assert db.get_table("users") is table
        assert db.require_table("users") is table
        assert "users" in db
        assert db.table_names() == ["users"]

    def test_duplicate_table(self) -> None:
        db = Database()
        db.create_table("users")
        with pytest.raises(TableExistsError):
            db.create_table("users")

    def test_missing_table(self) -> None:
        db = Database()
        assert db.get_table("orders") is None
        with pytest.raises(TableNotFoundError) as exc_info:
            db.require_table("orders")
        assert exc_info.value.table_name == "orders"
        assert "orders" in str(exc_info.value)

    def test_drop_table(self) -> None:
        db = Database()
        db.create_table("users")
        assert db.drop_table("users") is True
        assert db.drop_table("users") is False
        assert len(db) == 0
