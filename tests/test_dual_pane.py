"""Tests for the environment-then-file coordinator."""

from __future__ import annotations

import unittest
from unittest import mock

from lazypick.dual_pane import DualPaneSelection, DualPaneSession, PaneFocus, Phase, partition_heights, run_dual_pane
from lazypick.selection import EmptyCandidatesError
from lazypick.ui_theme import PLAIN_THEME

ENVS = ["dev", "staging", "prod"]
FILES = ["users/get.yaml", "users/create.yaml", "orders/list.yaml"]


def _session(**kwargs) -> DualPaneSession:
    return DualPaneSession(ENVS, FILES, theme=PLAIN_THEME, **kwargs)


def _type(session: DualPaneSession, text: str) -> None:
    for ch in text:
        session.handle_key(ch)


class DualPaneFlowTests(unittest.TestCase):
    def test_starts_on_env_pane(self) -> None:
        session = _session()
        self.assertIs(session.phase, Phase.AWAITING_ENV)
        self.assertIs(session.focus, PaneFocus.ENV)

    def test_env_then_file_completes(self) -> None:
        session = _session()
        _type(session, "stag")
        session.handle_key("ENTER")
        self.assertIs(session.focus, PaneFocus.FILE)
        self.assertEqual(session.selected_env, "staging")

        _type(session, "users")
        session.handle_key("DOWN")
        session.handle_key("ENTER")

        self.assertIs(session.phase, Phase.DONE)
        result = session.result()
        self.assertFalse(result.cancelled)
        self.assertEqual(result.selection, DualPaneSelection(env="staging", file="users/create.yaml"))

    def test_enter_on_gated_env_pane_without_input_stays(self) -> None:
        session = _session()
        session.handle_key("ENTER")
        self.assertIs(session.phase, Phase.AWAITING_ENV)

    def test_file_enter_without_env_returns_to_env_pane(self) -> None:
        session = _session()
        session.handle_key("TAB")
        _type(session, "orders")
        session.handle_key("ENTER")

        self.assertIs(session.focus, PaneFocus.ENV)
        self.assertFalse(session.done)
        self.assertEqual(session.selected_file, "")

    def test_tab_toggles_when_unlocked(self) -> None:
        session = _session()
        session.handle_key("TAB")
        self.assertIs(session.focus, PaneFocus.FILE)
        session.handle_key("TAB")
        self.assertIs(session.focus, PaneFocus.ENV)

    def test_typing_edits_focused_pane_only(self) -> None:
        session = _session()
        _type(session, "pr")
        self.assertEqual(session.env_pane.list.filtered, ["prod"])
        self.assertEqual(session.file_pane.list.filter_text, "")


class DualPaneCancelTests(unittest.TestCase):
    def test_escape_clears_env_filter_then_cancels(self) -> None:
        session = _session()
        _type(session, "de")
        session.handle_key("ESC")
        self.assertFalse(session.done)
        self.assertEqual(session.env_pane.list.filter_text, "")

        session.handle_key("ESC")
        self.assertIs(session.phase, Phase.CANCELLED)
        self.assertTrue(session.result().cancelled)

    def test_escape_on_file_pane_clears_then_goes_back(self) -> None:
        session = _session()
        session.handle_key("TAB")
        _type(session, "users")
        session.handle_key("ESC")
        self.assertIs(session.focus, PaneFocus.FILE)
        self.assertEqual(session.file_pane.list.filter_text, "")

        session.handle_key("ESC")
        self.assertIs(session.focus, PaneFocus.ENV)
        self.assertFalse(session.done)

    def test_quit_cancels_from_any_state(self) -> None:
        session = _session()
        session.handle_key("TAB")
        _type(session, "users")
        session.handle_key("CTRL_C")

        self.assertTrue(session.cancelled)
        self.assertIsNone(session.result().selection)

    def test_keys_after_done_are_ignored(self) -> None:
        session = _session()
        session.handle_key("CTRL_C")
        session.handle_key("TAB")
        self.assertIs(session.phase, Phase.CANCELLED)


class LockedEnvironmentTests(unittest.TestCase):
    def test_locked_starts_on_file_and_tab_never_reaches_env(self) -> None:
        session = _session(initial_env="staging", env_locked=True)
        self.assertIs(session.focus, PaneFocus.FILE)
        for _ in range(3):
            session.handle_key("TAB")
            self.assertIs(session.focus, PaneFocus.FILE)

    def test_locked_value_is_the_result_env(self) -> None:
        session = _session(initial_env="staging", env_locked=True)
        _type(session, "list")
        session.handle_key("ENTER")

        self.assertEqual(session.result().selection, DualPaneSelection(env="staging", file="orders/list.yaml"))

    def test_locked_empty_env_still_completes(self) -> None:
        session = _session(initial_env="", env_locked=True)
        _type(session, "get")
        session.handle_key("ENTER")

        self.assertIs(session.phase, Phase.DONE)
        self.assertEqual(session.result().selection.env, "")

    def test_escape_without_filter_cancels_when_locked(self) -> None:
        session = _session(initial_env="prod", env_locked=True)
        session.handle_key("ESC")
        self.assertTrue(session.cancelled)

    def test_locked_render_shows_value_and_note(self) -> None:
        session = _session(env_locked=True)
        frame = "\n".join(session.render())

        self.assertIn("> global", frame)
        self.assertIn("Environment is locked", frame)


class LayoutTests(unittest.TestCase):
    def test_partition_heights(self) -> None:
        self.assertEqual(partition_heights(40, False), (8, 17))
        self.assertEqual(partition_heights(40, True), (1, 23))
        self.assertEqual(partition_heights(10, False), (1, 3))

    def test_pane_viewport_shrinks_to_content(self) -> None:
        session = _session()
        session.resize(80, 40)
        _type(session, "d")
        self.assertEqual(session.env_pane.viewport.height, 2)

    def test_render_contains_both_sections(self) -> None:
        session = _session()
        session.resize(80, 30)
        _type(session, "prod")
        frame = "\n".join(session.render())

        self.assertIn("Environment", frame)
        self.assertIn("Request File", frame)
        self.assertIn("Select Environment: prod█", frame)
        self.assertIn(">  prod", frame)
        self.assertIn("tab: switch env/file", frame)


class RunDualPaneTests(unittest.TestCase):
    def test_empty_inputs_raise(self) -> None:
        with mock.patch("lazypick.runtime.run_interactive") as run_mock:
            with self.assertRaises(EmptyCandidatesError):
                run_dual_pane(ENVS, [])
            with self.assertRaises(EmptyCandidatesError):
                run_dual_pane([], FILES)
        run_mock.assert_not_called()

    def test_locked_env_allows_no_env_items(self) -> None:
        with mock.patch("lazypick.runtime.run_interactive", return_value="ok") as run_mock:
            self.assertEqual(run_dual_pane([], FILES, "prod", True, theme=PLAIN_THEME), "ok")
        session = run_mock.call_args.args[0]
        self.assertTrue(session.env_locked)
        self.assertEqual(session.selected_env, "prod")


if __name__ == "__main__":
    unittest.main()
