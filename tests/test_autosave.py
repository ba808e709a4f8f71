import asyncio
import logging

from app.services.editor import (
    AutosaveCoordinator,
    ContentChanged,
    Draft,
    EditorSession,
    NotePageController,
    PendingSave,
    Persisted,
)
from tests.conftest import DEBOUNCE


async def _settle(controller: NotePageController, windows: float = 2.5) -> None:
    await asyncio.sleep(DEBOUNCE * windows)
    await controller.autosave.drain()


async def test_burst_of_edits_persists_once_with_latest_values(repo) -> None:
    controller = NotePageController.new(repo, delay_seconds=DEBOUNCE)

    for i in range(5):
        controller.handle_change(ContentChanged(title=f"Draft {i}", content=f"<p>body {i}</p>"))
        await asyncio.sleep(DEBOUNCE / 5)

    await _settle(controller)

    assert repo.writes == [("insert", "Draft 4", "<p>body 4</p>")]


async def test_title_then_idle_creates_exactly_once(repo) -> None:
    controller = NotePageController.new(repo, delay_seconds=DEBOUNCE)

    controller.handle_change(ContentChanged(title="Groceries", content=""))
    await _settle(controller)

    assert repo.writes == [("insert", "Groceries", "")]
    assert controller.session.identity == Persisted("note-1")


async def test_first_save_captures_id_and_later_saves_update(repo) -> None:
    controller = NotePageController.new(repo, delay_seconds=DEBOUNCE)

    controller.handle_change(ContentChanged(title="Plan", content="<p>a</p>"))
    await _settle(controller)
    controller.handle_change(ContentChanged(title="Plan", content="<p>a b</p>"))
    await _settle(controller)
    controller.handle_change(ContentChanged(title="Plan v2", content="<p>a b c</p>"))
    await _settle(controller)

    assert [c[0] for c in repo.writes] == ["insert", "update", "update"]
    assert repo.writes[1] == ("update", "note-1", "Plan", "<p>a b</p>")
    assert repo.writes[2] == ("update", "note-1", "Plan v2", "<p>a b c</p>")


async def test_two_quick_edits_on_persisted_note_send_one_update(repo) -> None:
    note = repo.seed("Shopping", "<p>milk</p>")
    controller = await NotePageController.open(repo, note.id, delay_seconds=DEBOUNCE)
    repo.calls.clear()
    repo.call_times.clear()
    loop = asyncio.get_running_loop()

    controller.handle_change(ContentChanged(title="Shopping", content="<p>milk, eggs</p>"))
    await asyncio.sleep(DEBOUNCE / 2)
    controller.handle_change(ContentChanged(title="Shopping list", content="<p>milk, eggs, tea</p>"))
    second_edit_at = loop.time()

    await _settle(controller)

    assert repo.writes == [("update", note.id, "Shopping list", "<p>milk, eggs, tea</p>")]
    assert repo.call_times[0] - second_edit_at >= DEBOUNCE * 0.9


async def test_blank_autosave_makes_no_remote_calls(repo) -> None:
    controller = NotePageController.new(repo, delay_seconds=DEBOUNCE)

    controller.handle_change(ContentChanged(title="   ", content="<p></p>"))
    await _settle(controller)

    assert repo.calls == []
    assert controller.session.identity == Draft()


async def test_autosave_failure_is_logged_and_clears_saving_flag(repo, caplog) -> None:
    repo.fail_with = RuntimeError("network down")
    controller = NotePageController.new(repo, delay_seconds=DEBOUNCE)

    with caplog.at_level(logging.ERROR):
        controller.handle_change(ContentChanged(title="Idea", content="<p>x</p>"))
        await _settle(controller)

    session = controller.session
    assert len(repo.writes) == 1
    assert session.saving is False
    assert session.last_saved_at is None
    assert session.last_error == "network down"
    assert session.identity == Draft()
    assert "Autosave failed" in caplog.text


async def test_failed_autosave_retries_on_next_edit_only(repo) -> None:
    repo.fail_with = RuntimeError("timeout")
    controller = NotePageController.new(repo, delay_seconds=DEBOUNCE)

    controller.handle_change(ContentChanged(title="Idea", content=""))
    await _settle(controller, windows=4)
    assert len(repo.writes) == 1

    repo.fail_with = None
    controller.handle_change(ContentChanged(title="Idea 2", content=""))
    await _settle(controller)

    assert repo.writes[-1] == ("insert", "Idea 2", "")
    assert controller.session.last_error is None
    assert controller.session.last_saved_at is not None


async def test_saving_flag_held_while_persist_runs(repo) -> None:
    repo.gate = asyncio.Event()
    controller = NotePageController.new(repo, delay_seconds=DEBOUNCE)

    controller.handle_change(ContentChanged(title="Slow", content=""))
    await asyncio.sleep(DEBOUNCE * 2)

    assert controller.session.saving is True
    assert controller.snapshot().saving is True

    repo.gate.set()
    await controller.autosave.drain()

    assert controller.session.saving is False
    assert controller.session.last_saved_at is not None


async def test_close_cancels_pending_save(repo) -> None:
    controller = NotePageController.new(repo, delay_seconds=DEBOUNCE)

    controller.handle_change(ContentChanged(title="Leaving", content=""))
    assert controller.autosave.pending is True

    controller.close()
    await _settle(controller)

    assert controller.autosave.pending is False
    assert repo.calls == []


async def test_close_does_not_cancel_save_in_flight(repo) -> None:
    repo.gate = asyncio.Event()
    controller = NotePageController.new(repo, delay_seconds=DEBOUNCE)

    controller.handle_change(ContentChanged(title="Racing", content=""))
    await asyncio.sleep(DEBOUNCE * 2)
    controller.close()
    repo.gate.set()
    await controller.autosave.drain()

    assert repo.writes == [("insert", "Racing", "")]
    assert controller.session.last_saved_at is not None


async def test_changes_after_close_are_not_scheduled(repo) -> None:
    session = EditorSession(title="t")
    coordinator = AutosaveCoordinator(session, repo, DEBOUNCE)
    coordinator.close()

    coordinator.schedule()
    await asyncio.sleep(DEBOUNCE * 2)

    assert coordinator.pending is False
    assert repo.calls == []


async def test_pending_save_cancel_prevents_callback() -> None:
    fired = []
    loop = asyncio.get_running_loop()
    pending = PendingSave(loop.call_later(DEBOUNCE, lambda: fired.append(True)))

    pending.cancel()
    await asyncio.sleep(DEBOUNCE * 2)

    assert pending.cancelled is True
    assert fired == []
