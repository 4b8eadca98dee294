"""Event loop wiring tests with a scripted terminal and reader."""

from __future__ import annotations

import os
import unittest
from contextlib import contextmanager
from pathlib import Path

from cdplus.formatting import FormatCode
from cdplus.listing import DirectoryChild
from cdplus.navigator import QUIT, DirectoryRead, Export, initial_state
from cdplus.render import RenderContext
from cdplus.runtime import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop

ROOT = Path("/work")


class _FakeTerminal:
    def __init__(self) -> None:
        self.entered = 0
        self.exited = 0

    @contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1


class _Script:
    """Feeds key tokens and result batches to the loop, one per poll."""

    def __init__(self, keys, batches=()) -> None:
        self.keys = list(keys)
        self.batches = list(batches)
        self.scheduled: list[Path] = []
        self.frames: list[RenderContext] = []
        self.size = os.terminal_size((80, 24))

    def read_key(self, _timeout_ms: int) -> str:
        if not self.keys:
            raise AssertionError("loop kept polling after the script ended")
        key = self.keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key

    def drain_results(self) -> list[DirectoryRead]:
        return self.batches.pop(0) if self.batches else []

    def callbacks(self) -> RuntimeLoopCallbacks:
        return RuntimeLoopCallbacks(
            read_key=self.read_key,
            terminal_size=lambda: self.size,
            render=self.frames.append,
            schedule_read=self.scheduled.append,
            drain_results=self.drain_results,
        )


def _state():
    return initial_state(
        ROOT,
        (DirectoryChild("app", is_dir=True), DirectoryChild("README.md")),
    )


def _run(script: _Script, terminal: _FakeTerminal | None = None):
    return run_main_loop(
        _state(),
        terminal or _FakeTerminal(),
        RuntimeLoopTiming(key_poll_ms=1),
        script.callbacks(),
    )


class RuntimeLoopTests(unittest.TestCase):
    def test_quit_returns_outcome_and_restores_terminal(self) -> None:
        terminal = _FakeTerminal()
        outcome = _run(_Script(["q"]), terminal)
        self.assertEqual(outcome.command, QUIT)
        self.assertEqual((terminal.entered, terminal.exited), (1, 1))

    def test_terminal_is_restored_when_loop_raises(self) -> None:
        terminal = _FakeTerminal()
        with self.assertRaises(RuntimeError):
            _run(_Script([RuntimeError("boom")]), terminal)
        self.assertEqual(terminal.exited, 1)

    def test_descend_schedules_read_and_crlf_counts_once(self) -> None:
        script = _Script(["j", "ENTER_CR", "ENTER_LF", "q"])
        outcome = _run(script)
        self.assertEqual(script.scheduled, [ROOT / "app"])
        self.assertEqual(outcome.state.current_path, ROOT)

    def test_lone_lf_is_enter(self) -> None:
        script = _Script(["j", "ENTER_LF", "q"])
        _run(script)
        self.assertEqual(script.scheduled, [ROOT / "app"])

    def test_results_are_applied_before_next_key(self) -> None:
        arrived = DirectoryRead(path=ROOT / "app", children=(DirectoryChild("main.py"),))
        script = _Script(["", "G", "f"], batches=[[], [arrived]])

        outcome = _run(script)

        self.assertEqual(outcome.command, Export(FormatCode.BASE_NAME, ROOT / "app" / "main.py"))
        self.assertEqual(outcome.state.current_path, ROOT / "app")
        self.assertIs(outcome.state.pending_export_format, FormatCode.BASE_NAME)

    def test_interrupts_and_timeouts_are_ignored(self) -> None:
        outcome = _run(_Script([KeyboardInterrupt(), "", "CTRL_C"]))
        self.assertEqual(outcome.command, QUIT)

    def test_renders_only_when_something_changed(self) -> None:
        script = _Script(["", "x", "", "j", "q"])
        _run(script)
        self.assertEqual(len(script.frames), 2)
        self.assertEqual(script.frames[0].state.cursor, 0)
        self.assertEqual(script.frames[1].state.cursor, 1)
        self.assertEqual((script.frames[0].width, script.frames[0].height), (80, 24))

    def test_page_keys_move_by_visible_listing_rows(self) -> None:
        state = initial_state(ROOT, tuple(DirectoryChild(f"f{idx:02d}") for idx in range(40)))
        script = _Script(["PAGE_DOWN", "q"])
        outcome = run_main_loop(state, _FakeTerminal(), RuntimeLoopTiming(key_poll_ms=1), script.callbacks())
        # 24 terminal rows minus title and two help rows.
        self.assertEqual(outcome.state.cursor, 21)

    def test_resize_triggers_render(self) -> None:
        script = _Script(["", "", "q"])
        original_read_key = script.read_key

        def _read_and_resize(timeout_ms: int) -> str:
            key = original_read_key(timeout_ms)
            script.size = os.terminal_size((100, 30))
            return key

        script.read_key = _read_and_resize
        _run(script)
        self.assertEqual(len(script.frames), 2)
        self.assertEqual(script.frames[-1].width, 100)


if __name__ == "__main__":
    unittest.main()
