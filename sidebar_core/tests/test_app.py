from __future__ import annotations

import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path
import sys

from rich.console import Console

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from sidebar_core.app import main  # noqa: E402

SNAPSHOT = {
    "sidebars": {
        "sidebar-1": {"name": "Widget Area", "id": "sidebar-1", "description": ""},
        "sidebar-2": {"name": "Footer", "id": "sidebar-2", "description": "Footer widgets"},
    },
    "sidebars_widgets": {"sidebar-1": ["search-2", "recent-posts-2"], "sidebar-2": []},
    "capabilities": ["unused_sidebar"],
}


class CliTests(unittest.TestCase):
    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.snapshot = Path(tmp.name) / "sidebars.json"
        self.snapshot.write_text(json.dumps(SNAPSHOT))

    def run_cli(self, *argv: str) -> tuple[int, str, str]:
        stdout = io.StringIO()
        stderr = io.StringIO()
        err = Console(file=stderr, width=200)
        with contextlib.redirect_stdout(stdout):
            code = main(["--snapshot", str(self.snapshot), *argv], err=err)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_list_csv(self):
        code, out, _ = self.run_cli("sidebar", "list", "--fields=name,id", "--format=csv")
        self.assertEqual(code, 0)
        self.assertEqual(out, "name,id\nWidget Area,sidebar-1\nFooter,sidebar-2\n")

    def test_list_count_and_ids(self):
        _, count, _ = self.run_cli("sidebar", "list", "--format=count")
        _, ids, _ = self.run_cli("sidebar", "list", "--format=ids")
        self.assertEqual(count, "2\n")
        self.assertEqual(ids, "sidebar-1 sidebar-2\n")

    def test_get_placeholder_registered_by_hook(self):
        code, out, _ = self.run_cli("sidebar", "get", "wp_inactive_widgets", "--format=json")
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["id"], "wp_inactive_widgets")

    def test_get_unknown(self):
        code, out, err = self.run_cli("sidebar", "get", "unknown-id")
        self.assertNotEqual(code, 0)
        self.assertEqual(out, "")
        self.assertIn("unknown-id", err)
        self.assertIn("Error:", err)

    def test_exists_exit_status_only(self):
        code, out, err = self.run_cli("sidebar", "exists", "sidebar-1")
        self.assertEqual((code, out, err), (0, "", ""))
        code, out, err = self.run_cli("sidebar", "exists", "missing")
        self.assertEqual((code, out, err), (1, "", ""))

    def test_widgets_ids(self):
        code, out, _ = self.run_cli("sidebar", "widgets", "sidebar-1", "--format=ids")
        self.assertEqual(code, 0)
        self.assertEqual(out, "search-2 recent-posts-2\n")

    def test_widgets_empty_warning(self):
        code, out, err = self.run_cli("sidebar", "widgets", "sidebar-2")
        self.assertEqual(code, 0)
        self.assertEqual(out, "")
        self.assertIn("No widgets found", err)

    def test_widgets_unknown(self):
        code, out, err = self.run_cli("sidebar", "widgets", "nope")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("'nope' does not exist", err)

    def test_invalid_field(self):
        code, out, err = self.run_cli("sidebar", "list", "--fields=name,colour")
        self.assertEqual(code, 1)
        self.assertIn("Invalid field: colour", err)

    def test_config_default_format(self):
        cfg = self.snapshot.parent / "cfg.json"
        cfg.write_text(json.dumps({"format": "ids"}))
        _, out, _ = self.run_cli("--config", str(cfg), "sidebar", "list")
        self.assertEqual(out, "sidebar-1 sidebar-2\n")
        _, out, _ = self.run_cli("--config", str(cfg), "sidebar", "list", "--format=count")
        self.assertEqual(out, "2\n")

    def test_list_table_with_bracketed_name(self):
        payload = {"sidebars": [{"id": "s1", "name": "Bad [/] name"}]}
        self.snapshot.write_text(json.dumps(payload))
        code, out, err = self.run_cli("sidebar", "list")
        self.assertEqual(code, 0)
        self.assertIn("Bad [/] name", out)
        self.assertEqual(err, "")

    def test_debug_line_keeps_bracketed_path(self):
        bracketed = self.snapshot.parent / "[site]"
        bracketed.mkdir()
        self.snapshot = bracketed / "sidebars.json"
        self.snapshot.write_text(json.dumps(SNAPSHOT))
        code, _, err = self.run_cli("--debug", "sidebar", "exists", "sidebar-1")
        self.assertEqual(code, 0)
        self.assertIn("[site]", err)
        self.assertIn("(2 sidebars)", err)

    def test_config_directory_is_reported(self):
        code, out, err = self.run_cli("--config", str(self.snapshot.parent), "sidebar", "list")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("cannot read config", err)

    def test_missing_snapshot(self):
        self.snapshot.unlink()
        code, out, err = self.run_cli("sidebar", "list")
        self.assertEqual(code, 1)
        self.assertIn("cannot read snapshot", err)

    def test_bad_format_is_usage_error(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["sidebar", "get", "sidebar-1", "--format=csv"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
