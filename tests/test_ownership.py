"""Unit tests for app.core.ownership."""

import unittest

from app.core.exceptions import AuthorizationError, NotFoundError
from app.core.ownership import ensure_owner, is_owner


class TestIsOwner(unittest.TestCase):
    def test_same_id_is_owner(self) -> None:
        self.assertTrue(is_owner(1, 1))

    def test_different_id_is_not_owner(self) -> None:
        self.assertFalse(is_owner(2, 1))

    def test_ownerless_resource_has_no_owner(self) -> None:
        self.assertFalse(is_owner(1, None))


class TestEnsureOwner(unittest.TestCase):
    def test_owner_passes(self) -> None:
        ensure_owner(1, 1, "review", 10)

    def test_non_owner_is_forbidden(self) -> None:
        with self.assertRaises(AuthorizationError) as ctx:
            ensure_owner(2, 1, "review", 10)
        self.assertEqual(ctx.exception.status_code, 403)
        self.assertEqual(ctx.exception.context["resource_id"], 10)

    def test_forbidden_is_distinct_from_not_found(self) -> None:
        with self.assertRaises(AuthorizationError) as ctx:
            ensure_owner(2, 1, "recipe", 5)
        self.assertNotIsInstance(ctx.exception, NotFoundError)
