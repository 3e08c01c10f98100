"""Tests for NoteListController."""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from notes_core.controller import NoteListController
from notes_core.exceptions import StorageError
from tests.conftest import block_writes, pairs


class TestNoteListController:
    """Mutations keep the published list identical to the store."""

    def test_loads_existing_notes_on_construction(self, store):
        store.insert("already here")

        controller = NoteListController(store)

        assert pairs(controller.notes) == [(1, "already here")]

    def test_end_to_end_scenario(self, controller):
        assert controller.notes == ()

        controller.add_note("buy milk")
        assert pairs(controller.notes) == [(1, "buy milk")]

        controller.add_note("walk dog")
        assert pairs(controller.notes) == [(1, "buy milk"), (2, "walk dog")]

        controller.update_note(1, "buy oat milk")
        assert pairs(controller.notes) == [(1, "buy oat milk"), (2, "walk dog")]

        controller.delete_note(2)
        assert pairs(controller.notes) == [(1, "buy oat milk")]

    def test_notes_match_store_after_each_mutation(self, controller, store):
        controller.add_note("a")
        assert list(controller.notes) == store.list_all()
        controller.update_note(1, "b")
        assert list(controller.notes) == store.list_all()
        controller.delete_note(1)
        assert list(controller.notes) == store.list_all()

    def test_add_assigns_unused_id(self, controller):
        controller.add_note("first")
        controller.delete_note(1)

        controller.add_note("second")

        assert [note.id for note in controller.notes] == [2]

    def test_missing_ids_are_noops(self, controller):
        controller.add_note("only")
        before = controller.notes

        controller.update_note(42, "nope")
        controller.delete_note(42)

        assert controller.notes == before

    def test_delete_twice_is_noop(self, controller):
        controller.add_note("gone")
        controller.delete_note(1)
        controller.delete_note(1)

        assert controller.notes == ()

    def test_notes_snapshot_is_replaced_not_mutated(self, controller):
        controller.add_note("one")
        snapshot = controller.notes

        controller.add_note("two")

        assert pairs(snapshot) == [(1, "one")]
        assert controller.notes is not snapshot

    def test_controller_does_not_validate_content(self, controller):
        controller.add_note("")

        assert pairs(controller.notes) == [(1, "")]


class TestObservers:
    """Change notifications."""

    def test_observer_called_once_per_mutation(self, controller):
        published = []
        controller.subscribe(published.append)

        controller.add_note("one")
        controller.update_note(1, "uno")
        controller.delete_note(1)

        assert [pairs(notes) for notes in published] == [[(1, "one")], [(1, "uno")], []]

    def test_observer_receives_current_list(self, controller):
        seen = []
        controller.subscribe(lambda notes: seen.append(notes is controller.notes))

        controller.add_note("x")

        assert seen == [True]

    def test_unsubscribe_stops_notifications(self, controller):
        published = []
        unsubscribe = controller.subscribe(published.append)

        controller.add_note("one")
        unsubscribe()
        unsubscribe()
        controller.add_note("two")

        assert len(published) == 1

    def test_refresh_publishes_external_changes(self, controller, store):
        published = []
        controller.subscribe(published.append)
        store.insert("written behind the controller's back")

        controller.refresh()

        assert pairs(controller.notes) == [(1, "written behind the controller's back")]
        assert len(published) == 1


class TestFailures:
    """Storage failures surface unchanged and leave the list alone."""

    def test_storage_error_propagates_and_keeps_notes(self, controller, store):
        controller.add_note("safe")
        before = controller.notes
        published = []
        controller.subscribe(published.append)
        store.close()

        with pytest.raises(StorageError):
            controller.add_note("lost")
        with pytest.raises(StorageError):
            controller.update_note(1, "lost")
        with pytest.raises(StorageError):
            controller.delete_note(1)

        assert controller.notes == before
        assert published == []

    @pytest.mark.parametrize(
        "mutation",
        [
            lambda c: c.add_note("lost"),
            lambda c: c.update_note(1, "lost"),
            lambda c: c.delete_note(1),
        ],
        ids=["add", "update", "delete"],
    )
    def test_engine_error_keeps_notes_and_skips_observers(self, controller, store, mutation):
        controller.add_note("safe")
        before = controller.notes
        published = []
        controller.subscribe(published.append)
        block_writes(store)

        with pytest.raises(StorageError) as exc_info:
            mutation(controller)

        assert isinstance(exc_info.value.__cause__, SQLAlchemyError)
        assert store.list_all() == list(before)
        assert controller.notes == before
        assert published == []
