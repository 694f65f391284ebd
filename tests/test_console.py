"""
Tests for the trace console (log store).
"""

import dataclasses
from unittest.mock import MagicMock, patch

import pytest

from layout_measurement.core import console as console_module
from layout_measurement.core.console import Console, LogEntry, get_console


class TestLogEntry:
    """Tests for LogEntry"""

    def test_ids_are_unique(self):
        a = LogEntry("Propose A", "1.00⨉1.00")
        b = LogEntry("Propose A", "1.00⨉1.00")
        assert a.id != b.id

    def test_entries_are_immutable(self):
        entry = LogEntry("Report A", "1.00⨉1.00")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.label = "changed"  # type: ignore[misc]


class TestConsoleAppend:
    """Tests for Console.append() and Console.log()"""

    def test_append_keeps_insertion_order(self, console):
        console.log("Propose A", "1")
        console.log("Propose B", "2")
        console.log("Report B", "3")
        assert console.labels() == ["Propose A", "Propose B", "Report B"]

    def test_log_returns_the_appended_entry(self, console):
        entry = console.log("Report A", "10.00⨉10.00")
        assert console.current() == (entry,)

    def test_append_accepts_prebuilt_entries(self, console):
        entry = LogEntry("Propose X", "nil⨉nil")
        console.append(entry)
        assert console.current()[0] is entry

    def test_len_and_iter(self, console):
        console.log("a", "1")
        console.log("b", "2")
        assert len(console) == 2
        assert [e.value for e in console] == ["1", "2"]


class TestConsoleClear:
    """Tests for Console.clear()"""

    def test_clear_empties_the_log(self, console):
        for i in range(5):
            console.log(f"Propose {i}", "0.00⨉0.00")
        console.clear()
        assert len(console) == 0
        assert console.current() == ()

    def test_clear_on_empty_console(self, console):
        console.clear()
        assert len(console) == 0

    def test_entries_after_clear_only_reflect_new_writes(self, console):
        console.log("old", "1")
        console.clear()
        console.log("new", "2")
        assert console.labels() == ["new"]


class TestConsoleSnapshots:
    """Tests for Console.current()"""

    def test_snapshot_does_not_follow_later_writes(self, console):
        console.log("a", "1")
        snapshot = console.current()
        console.log("b", "2")
        assert len(snapshot) == 1

    def test_snapshot_survives_clear(self, console):
        console.log("a", "1")
        snapshot = console.current()
        console.clear()
        assert [e.label for e in snapshot] == ["a"]


class TestConsoleListeners:
    """Tests for subscribe/unsubscribe and notification"""

    def test_listener_receives_snapshot_after_append(self, console):
        listener = MagicMock()
        console.subscribe(listener)

        entry = console.log("Propose A", "1")

        listener.assert_called_once_with((entry,))

    def test_listener_receives_empty_snapshot_on_clear(self, console):
        console.log("Propose A", "1")
        listener = MagicMock()
        console.subscribe(listener)

        console.clear()

        listener.assert_called_once_with(())

    def test_notification_is_synchronous(self, console):
        seen = []
        console.subscribe(lambda snapshot: seen.append(len(snapshot)))
        console.log("a", "1")
        assert seen == [1]
        console.log("b", "2")
        assert seen == [1, 2]

    def test_every_listener_is_notified(self, console):
        first, second = MagicMock(), MagicMock()
        console.subscribe(first)
        console.subscribe(second)
        console.log("a", "1")
        assert first.call_count == second.call_count == 1

    def test_unsubscribe_callable_stops_notifications(self, console):
        listener = MagicMock()
        unsubscribe = console.subscribe(listener)
        unsubscribe()
        console.log("a", "1")
        listener.assert_not_called()

    def test_unsubscribe_unknown_listener_is_ignored(self, console):
        console.unsubscribe(MagicMock())

    def test_listener_can_read_current_during_notification(self, console):
        seen = []
        console.subscribe(lambda snapshot: seen.append(console.current() == snapshot))
        console.log("a", "1")
        assert seen == [True]

    def test_failing_listener_does_not_block_others(self, console):
        broken = MagicMock(side_effect=RuntimeError("boom"))
        healthy = MagicMock()
        console.subscribe(broken)
        console.subscribe(healthy)

        with patch.object(console_module, "exception") as mock_exception:
            console.log("a", "1")

        healthy.assert_called_once()
        mock_exception.assert_called_once()
        assert len(console) == 1


class TestSharedConsole:
    """Tests for the process-wide console"""

    def test_get_console_returns_same_instance(self):
        assert get_console() is get_console()

    def test_clear_keeps_the_instance(self):
        shared = get_console()
        shared.log("a", "1")
        shared.clear()
        assert get_console() is shared
        assert len(shared) == 0

    def test_created_lazily(self):
        with patch.object(console_module, "_console", None):
            created = get_console()
            assert isinstance(created, Console)
            assert console_module._console is created
