"""Unit tests for app.services.dashboard: totals and the recent zones list."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from app.services.dashboard import RECENT_ZONES_LIMIT, build_dashboard_summary
from tests.helpers import add_template, add_user, add_zone, make_session_factory


class TestDashboardSummary(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session_factory()()
        add_template(self.db, 1, "Administrator", ("user_is_ueberuser",))

    def tearDown(self) -> None:
        self.db.close()

    def test_empty_database(self) -> None:
        summary = build_dashboard_summary(self.db)
        self.assertEqual(summary.total_zones, 0)
        self.assertEqual(summary.total_records, 0)
        self.assertEqual(summary.total_users, 0)
        self.assertEqual(summary.recent_zones, [])

    def test_counts(self) -> None:
        add_user(self.db, "admin", perm_templ=1)
        add_user(self.db, "bob", perm_templ=1)
        add_zone(self.db, "example.com", records=4)
        add_zone(self.db, "example.net", records=6)
        add_zone(self.db, "example.org")
        summary = build_dashboard_summary(self.db)
        self.assertEqual(summary.total_zones, 3)
        self.assertEqual(summary.total_records, 10)
        self.assertEqual(summary.total_users, 2)
        self.assertEqual(
            [(z.name, z.record_count) for z in summary.recent_zones],
            [("example.org", 0), ("example.net", 6), ("example.com", 4)],
        )

    def test_recent_zones_limited_and_newest_first(self) -> None:
        for i in range(7):
            add_zone(self.db, f"zone{i}.test")
        summary = build_dashboard_summary(self.db)
        self.assertEqual(summary.total_zones, 7)
        self.assertEqual(len(summary.recent_zones), RECENT_ZONES_LIMIT)
        ids = [z.id for z in summary.recent_zones]
        self.assertEqual(ids, sorted(ids, reverse=True))
        self.assertEqual(summary.recent_zones[0].name, "zone6.test")

    def test_query_errors_propagate(self) -> None:
        db = MagicMock()
        db.query.side_effect = OperationalError("SELECT", {}, Exception("down"))
        with self.assertRaises(OperationalError):
            build_dashboard_summary(db)


if __name__ == "__main__":
    unittest.main()
