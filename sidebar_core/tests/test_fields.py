from __future__ import annotations

import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from sidebar_core.errors import InvalidField  # noqa: E402
from sidebar_core.fields import DEFAULT_SIDEBAR_FIELDS, SIDEBAR_FIELDS, parse_fields, project_sidebar  # noqa: E402
from sidebar_core.models import Sidebar  # noqa: E402


class FieldTests(unittest.TestCase):
    def test_default_when_unset(self):
        self.assertEqual(parse_fields(None, SIDEBAR_FIELDS, DEFAULT_SIDEBAR_FIELDS), ["name", "id", "description"])

    def test_whitespace_and_duplicates(self):
        fields = parse_fields(" id, name,,id ", SIDEBAR_FIELDS, DEFAULT_SIDEBAR_FIELDS)
        self.assertEqual(fields, ["id", "name"])

    def test_unknown_field(self):
        with self.assertRaises(InvalidField) as ctx:
            parse_fields("name,Name", SIDEBAR_FIELDS, DEFAULT_SIDEBAR_FIELDS)
        self.assertEqual(ctx.exception.name, "Name")

    def test_projection_fills_missing_attributes(self):
        sidebar = Sidebar(id="sidebar-1", name="Widget Area", attributes={"class": "main"})
        self.assertEqual(
            project_sidebar(sidebar, ["id", "class", "after_widget"]),
            {"id": "sidebar-1", "class": "main", "after_widget": ""},
        )


if __name__ == "__main__":
    unittest.main()
