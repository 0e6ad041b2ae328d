"""CLI argument, candidate loading and exit-status tests.

Drives ``lazypick.cli.main`` with the picker runners mocked out, so only
argument plumbing, config fallbacks and output formatting are exercised.
"""

from __future__ import annotations

import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazypick import cli
from lazypick.dual_pane import DualPaneSelection
from lazypick.runtime import config
from lazypick.selection import SessionResult
from lazypick.ui_theme import OCEAN_THEME, PLAIN_THEME

SCHEMA = {
    "endpoint": "https://api.test/graphql",
    "queries": [{"name": "getUser", "return_type": "User!", "arguments": [{"name": "id", "type": "ID!"}]}],
    "mutations": [{"name": "createUser", "arguments": [{"name": "input", "type": "UserInput!"}]}],
    "input_types": {"UserInput": {"fields": [{"name": "email", "type": "String!"}]}},
}


class CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        patches = [
            mock.patch("lazypick.runtime.config.CONFIG_PATH", self.tmp / "config" / "config.json"),
            mock.patch("lazypick.cli.configure_logging", return_value=None),
        ]
        for patcher in patches:
            patcher.start()
            self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def run_main(self, *argv: str) -> str:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            cli.main(list(argv))
        return out.getvalue()


class SelectCommandTests(CliTestCase):
    def test_items_from_arguments_and_file(self) -> None:
        source = self.tmp / "items.txt"
        source.write_text("beta\n\n  gamma  \n", encoding="utf-8")
        with mock.patch("lazypick.cli.run_selector", return_value=SessionResult.selected("gamma")) as run_mock:
            output = self.run_main("--no-color", "select", "alpha", "--from", str(source), "--prompt", "Pick: ")

        self.assertEqual(output, "gamma\n")
        items, prompt = run_mock.call_args.args
        self.assertEqual(items, ["alpha", "beta", "gamma"])
        self.assertEqual(prompt, "Pick: ")
        self.assertIs(run_mock.call_args.kwargs["theme"], PLAIN_THEME)

    def test_cancel_exits_with_status_one(self) -> None:
        out = io.StringIO()
        with mock.patch("lazypick.cli.run_selector", return_value=SessionResult.cancel()):
            with contextlib.redirect_stdout(out), self.assertRaises(SystemExit) as ctx:
                cli.main(["select", "a"])
        self.assertEqual(ctx.exception.code, cli.EXIT_CANCELLED)
        self.assertEqual(out.getvalue(), "")

    def test_empty_candidates_exit_with_message(self) -> None:
        with mock.patch("lazypick.runtime.run_interactive") as run_mock:
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["select"])
        run_mock.assert_not_called()
        self.assertTrue(str(ctx.exception.code).startswith("lazypick: "))

    def test_missing_candidate_file_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main(["select", "--from", str(self.tmp / "missing.txt")])
        self.assertIn("Cannot read", str(ctx.exception.code))


class PairCommandTests(CliTestCase):
    def test_locked_env_and_csv_lists(self) -> None:
        selection = SessionResult.selected(DualPaneSelection(env="prod", file="b.yaml"))
        with mock.patch("lazypick.cli.run_dual_pane", return_value=selection) as run_mock:
            output = self.run_main("pair", "--envs", "dev, prod", "--files", "a.yaml", "--files", "b.yaml", "--env", "prod")

        self.assertEqual(output, "prod\tb.yaml\n")
        self.assertEqual(run_mock.call_args.args, (["dev", "prod"], ["a.yaml", "b.yaml"], "prod", True))

    def test_unlocked_reads_files_from_disk(self) -> None:
        listing = self.tmp / "files.txt"
        listing.write_text("users/get.yaml\norders/list.yaml\n", encoding="utf-8")
        with mock.patch("lazypick.cli.run_dual_pane", return_value=SessionResult.cancel()) as run_mock:
            with self.assertRaises(SystemExit):
                self.run_main("pair", "--envs", "dev", "--files-from", str(listing))

        self.assertEqual(run_mock.call_args.args, (["dev"], ["users/get.yaml", "orders/list.yaml"], "", False))


class ExploreCommandTests(CliTestCase):
    def _write_schema(self, data: object) -> Path:
        path = self.tmp / "schema.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    def test_prints_signature_of_selected_operation(self) -> None:
        path = self._write_schema(SCHEMA)

        def pick_first(operations, input_types, **_kwargs):
            self.assertEqual([op.name for op in operations], ["getUser", "createUser"])
            self.assertEqual([item.name for item in input_types.values()], ["UserInput"])
            return SessionResult.selected(operations[0])

        with mock.patch("lazypick.cli.run_explorer", side_effect=pick_first):
            output = self.run_main("explore", str(path))

        self.assertEqual(output, "query getUser(id: ID!): User!\n")

    def test_load_schema_file_errors(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.load_schema_file(self.tmp / "missing.json")
        self.assertIn("Cannot read", str(ctx.exception.code))

        bad = self.tmp / "bad.json"
        bad.write_text("{oops", encoding="utf-8")
        with self.assertRaises(SystemExit) as ctx:
            cli.load_schema_file(bad)
        self.assertIn("Invalid JSON", str(ctx.exception.code))

        with self.assertRaises(SystemExit) as ctx:
            cli.load_schema_file(self._write_schema([1, 2]))
        self.assertIn("Expected a JSON object", str(ctx.exception.code))

    def test_schema_without_operations_exits(self) -> None:
        path = self._write_schema({"endpoint": "https://api.test/graphql"})
        with self.assertRaises(SystemExit) as ctx:
            cli.main(["explore", str(path)])
        self.assertTrue(str(ctx.exception.code).startswith("lazypick: "))


class GlobalOptionTests(CliTestCase):
    def test_theme_flag_is_persisted(self) -> None:
        with mock.patch("lazypick.cli.run_selector", return_value=SessionResult.selected("a")) as run_mock:
            self.run_main("--theme", "ocean", "select", "a")

        self.assertIs(run_mock.call_args.kwargs["theme"], OCEAN_THEME)
        self.assertEqual(config.load_theme_name(), "ocean")

        with mock.patch("lazypick.cli.run_selector", return_value=SessionResult.selected("a")) as run_mock:
            self.run_main("select", "a")
        self.assertIs(run_mock.call_args.kwargs["theme"], OCEAN_THEME)

    def test_scroll_margin_from_config_and_flag(self) -> None:
        config.save_config({"scroll_margin": 5})
        with mock.patch("lazypick.cli.run_selector", return_value=SessionResult.selected("a")) as run_mock:
            self.run_main("select", "a")
        self.assertEqual(run_mock.call_args.kwargs["scroll_margin"], 5)

        with mock.patch("lazypick.cli.run_selector", return_value=SessionResult.selected("a")) as run_mock:
            self.run_main("--scroll-margin", "0", "select", "a")
        self.assertEqual(run_mock.call_args.kwargs["scroll_margin"], 0)

    def test_unknown_log_level_in_config_is_ignored(self) -> None:
        config.save_config({"log_level": "verbose"})
        with mock.patch("lazypick.cli.configure_logging", return_value=None) as logging_mock, \
                mock.patch("lazypick.cli.run_selector", return_value=SessionResult.selected("a")), \
                self.assertLogs("lazypick.runtime.config", level="WARNING"):
            output = self.run_main("select", "a")

        self.assertEqual(output, "a\n")
        logging_mock.assert_called_once_with(None, None)

    def test_unknown_theme_is_rejected_and_not_saved(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            cli.main(["--theme", "neon", "select", "a"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIsNone(config.load_theme_name())

    def test_theme_name_is_case_insensitive(self) -> None:
        with mock.patch("lazypick.cli.run_selector", return_value=SessionResult.selected("a")) as run_mock:
            self.run_main("--theme", "Ocean", "select", "a")
        self.assertIs(run_mock.call_args.kwargs["theme"], OCEAN_THEME)
        self.assertEqual(config.load_theme_name(), "ocean")

    def test_unknown_log_level_exits(self) -> None:
        with mock.patch("lazypick.cli.configure_logging", side_effect=ValueError("unknown log level: 'LOUD'")):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--log-level", "loud", "select", "a"])
        self.assertIn("unknown log level", str(ctx.exception.code))

    def test_subcommand_is_required(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            cli.build_parser().parse_args([])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
