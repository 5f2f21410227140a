"""Tests for the user service against a real SQLite file."""

from __future__ import annotations

import sqlite3
import tempfile
import unittest
from pathlib import Path

from pocdemo.database import Database
from pocdemo.users import UserService


class UserServiceTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tempdir = tempfile.TemporaryDirectory()
        self.database = Database(Path(self._tempdir.name) / "poc.sqlite3")
        self.database.initialize()
        self.service = UserService(self.database)

    def tearDown(self) -> None:
        self._tempdir.cleanup()

    def test_list_returns_seeded_users_in_insertion_order(self) -> None:
        names = [user.name for user in self.service.list_users()]
        self.assertEqual(names, ["Ford Prefect", "Arthur Dent", "Zaphod Beeblebrox"])

    def test_create_assigns_id_and_timestamp(self) -> None:
        user = self.service.create_user("Trillian", "trillian@heartofgold.ship")

        self.assertIsNotNone(user.id)
        self.assertIsNotNone(user.created_at)
        self.assertEqual(self.service.get_user(user.id), user)

    def test_get_unknown_id_returns_none(self) -> None:
        self.assertIsNone(self.service.get_user(9999))

    def test_update_keeps_original_creation_time(self) -> None:
        created = self.service.create_user("Trillian", "trillian@heartofgold.ship")

        self.assertTrue(
            self.service.update_user(created.id, "Trillian Astra", "trillian@heartofgold.ship")
        )

        updated = self.service.get_user(created.id)
        self.assertIsNotNone(updated)
        self.assertEqual(updated.name, "Trillian Astra")
        self.assertEqual(updated.email, "trillian@heartofgold.ship")
        self.assertEqual(updated.created_at, created.created_at)

    def test_update_and_delete_unknown_id_leave_storage_unchanged(self) -> None:
        before = self.service.list_users()

        self.assertFalse(self.service.update_user(9999, "Nobody", "nobody@example.com"))
        self.assertFalse(self.service.delete_user(9999))

        self.assertEqual(self.service.list_users(), before)

    def test_delete_removes_user(self) -> None:
        user = self.service.create_user("Marvin", "marvin@heartofgold.ship")

        self.assertTrue(self.service.delete_user(user.id))
        self.assertIsNone(self.service.get_user(user.id))
        self.assertFalse(self.service.delete_user(user.id))

    def test_search_matches_substring(self) -> None:
        found = self.service.search_users_by_name("Ford")
        self.assertEqual([user.name for user in found], ["Ford Prefect"])

        found = self.service.search_users_by_name("e")
        self.assertEqual(
            [user.name for user in found],
            ["Ford Prefect", "Arthur Dent", "Zaphod Beeblebrox"],
        )

    def test_search_treats_wildcards_literally(self) -> None:
        self.service.create_user("100% Human", "human@example.com")

        self.assertEqual([u.name for u in self.service.search_users_by_name("%")], ["100% Human"])
        self.assertEqual(self.service.search_users_by_name("_"), [])

    def test_search_without_match_returns_empty_list(self) -> None:
        self.assertEqual(self.service.search_users_by_name("Vogon"), [])

    def test_search_is_case_insensitive_for_ascii(self) -> None:
        found = self.service.search_users_by_name("ford")
        self.assertEqual([user.name for user in found], ["Ford Prefect"])

        found = self.service.search_users_by_name("BEEBLE")
        self.assertEqual([user.name for user in found], ["Zaphod Beeblebrox"])

    def test_update_and_delete_wait_for_concurrent_writer(self) -> None:
        service = UserService(Database(self.database.path, timeout=0.1))
        writer = sqlite3.connect(self.database.path, isolation_level=None)
        try:
            writer.execute("BEGIN IMMEDIATE")
            writer.execute("DELETE FROM users WHERE id = 1")

            with self.assertRaises(sqlite3.OperationalError):
                service.update_user(1, "Ford", "ford@example.com")
            with self.assertRaises(sqlite3.OperationalError):
                service.delete_user(2)

            writer.execute("COMMIT")
        finally:
            writer.close()

        self.assertIsNone(service.get_user(1))
        self.assertFalse(service.update_user(1, "Ford", "ford@example.com"))
        self.assertEqual(
            [user.name for user in service.list_users()],
            ["Arthur Dent", "Zaphod Beeblebrox"],
        )


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
