"""Tests for undo.py - single-step undo / redo"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dataclasses import replace

from scoreboard.core.match_state import SettlementKind, initial_state
from scoreboard.engine.undo import (
    Committed, NoPendingTransition, SettlementMeta, UndoController, Undone,
)

META = SettlementMeta(SettlementKind.DRAW, "流局（东1局0本场）", "2026-03-01 20:15:00")


def make_pair():
    before = initial_state()
    after = replace(before, honba=1, pool=1, points=(24000, 25000, 25000, 25000))
    return before, after


class TestUndoController:
    def test_starts_empty(self):
        controller = UndoController()
        assert isinstance(controller.pending, NoPendingTransition)
        assert not controller.can_undo
        assert not controller.can_redo
        assert controller.meta is None

    def test_record_enables_undo(self):
        before, after = make_pair()
        controller = UndoController()
        controller.record(before, after, META)
        assert isinstance(controller.pending, Committed)
        assert controller.can_undo
        assert not controller.can_redo
        assert controller.meta == META

    def test_undo_then_redo(self):
        before, after = make_pair()
        controller = UndoController()
        controller.record(before, after, META)

        restored = controller.undo(after)
        assert restored == before
        assert isinstance(controller.pending, Undone)
        assert controller.can_redo
        assert not controller.can_undo

        redone = controller.redo(restored)
        assert redone == after
        assert isinstance(controller.pending, Committed)

    def test_second_undo_is_noop(self):
        before, after = make_pair()
        controller = UndoController()
        controller.record(before, after, META)
        restored = controller.undo(after)
        assert controller.undo(restored) is restored
        assert isinstance(controller.pending, Undone)

    def test_redo_without_undo_is_noop(self):
        before, after = make_pair()
        controller = UndoController()
        assert controller.redo(before) is before
        controller.record(before, after, META)
        assert controller.redo(after) is after

    def test_new_record_replaces_pair(self):
        before, after = make_pair()
        later = replace(after, honba=2)
        controller = UndoController()
        controller.record(before, after, META)
        controller.undo(after)
        controller.record(before, later, META)
        assert isinstance(controller.pending, Committed)
        assert controller.pending.after == later

    def test_clear(self):
        before, after = make_pair()
        controller = UndoController()
        controller.record(before, after, META)
        controller.clear()
        assert not controller.can_undo
        assert controller.undo(after) is after
