from unittest.mock import MagicMock

import pytest

from app.infra.supabase.repositories.notes import NoteRepository
from app.models.note import NoteCreate, NoteUpdate


def _client_returning(data):
    client = MagicMock()
    query = MagicMock()
    # Every builder method returns the same query so chains of any length work
    for method in ("select", "insert", "update", "delete", "eq", "order", "limit"):
        getattr(query, method).return_value = query
    query.execute.return_value = MagicMock(data=data)
    client.table.return_value = query
    return client, query


ROW = {
    "id": 42,
    "title": "Saved",
    "content": "<p>hi</p>",
    "created_at": "2025-05-01T10:00:00+00:00",
    "updated_at": "2025-05-01T10:00:00+00:00",
}


async def test_create_returns_assigned_id_as_string() -> None:
    client, query = _client_returning([ROW])
    repo = NoteRepository(client, table_name="notes")

    note = await repo.create(NoteCreate(title="Saved", content="<p>hi</p>"))

    assert note.id == "42"
    client.table.assert_called_with("notes")
    query.insert.assert_called_once_with({"title": "Saved", "content": "<p>hi</p>"})


async def test_create_without_returned_row_raises() -> None:
    client, _ = _client_returning([])
    repo = NoteRepository(client)

    with pytest.raises(ValueError):
        await repo.create(NoteCreate(title="x"))


async def test_update_sends_only_set_fields() -> None:
    client, query = _client_returning([ROW])
    repo = NoteRepository(client)

    note = await repo.update("42", NoteUpdate(content="<p>hi</p>"))

    assert note is not None
    query.update.assert_called_once_with({"content": "<p>hi</p>"})
    query.eq.assert_called_with("id", "42")


async def test_update_missing_row_returns_none() -> None:
    client, _ = _client_returning([])
    repo = NoteRepository(client)

    assert await repo.update("7", NoteUpdate(title="t")) is None


async def test_find_recent_orders_by_updated_at() -> None:
    client, query = _client_returning([ROW, {**ROW, "id": 43, "title": None}])
    repo = NoteRepository(client)

    notes = await repo.find_recent()

    query.order.assert_called_once_with("updated_at", desc=True)
    query.limit.assert_not_called()
    assert [n.id for n in notes] == ["42", "43"]
    assert notes[1].title == ""


async def test_delete_reports_whether_a_row_was_removed() -> None:
    client, _ = _client_returning([ROW])
    assert await NoteRepository(client).delete("42") is True

    client, _ = _client_returning([])
    assert await NoteRepository(client).delete("42") is False


async def test_store_errors_propagate() -> None:
    client, query = _client_returning([])
    query.execute.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await NoteRepository(client).find_by_id("1")
