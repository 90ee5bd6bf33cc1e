"""Unit tests for app.core.security: bcrypt hashing and the token issue/verify pair."""

import unittest
from datetime import UTC, datetime, timedelta

from app.core.exceptions import AuthenticationError, MalformedTokenError, TokenExpiredError
from app.core.security import TokenService, hash_password, verify_password

SECRET = "unit-test-signing-secret-0123456789abcdef"
USERNAME = "testuser"
USER_ID = 1


class FrozenClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or datetime(2025, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


def _service(clock: FrozenClock | None = None, expire_minutes: int = 60) -> TokenService:
    return TokenService(
        secret=SECRET,
        algorithm="HS256",
        expire_minutes=expire_minutes,
        clock=clock or FrozenClock(),
    )


class TestPasswordHashing(unittest.TestCase):
    def test_hash_verifies_against_plain(self) -> None:
        digest = hash_password("password123", rounds=4)
        self.assertTrue(verify_password("password123", digest))

    def test_wrong_password_rejected(self) -> None:
        digest = hash_password("password123", rounds=4)
        self.assertFalse(verify_password("password124", digest))

    def test_hash_is_salted(self) -> None:
        first = hash_password("password123", rounds=4)
        second = hash_password("password123", rounds=4)
        self.assertNotEqual(first, second)
        self.assertTrue(verify_password("password123", first))
        self.assertTrue(verify_password("password123", second))

    def test_digest_does_not_contain_plaintext(self) -> None:
        digest = hash_password("password123", rounds=4)
        self.assertNotIn("password123", digest)

    def test_empty_password_rejected_before_hashing(self) -> None:
        with self.assertRaises(ValueError):
            hash_password("", rounds=4)

    def test_corrupt_digest_is_false_not_error(self) -> None:
        self.assertFalse(verify_password("password123", "not-a-bcrypt-hash"))
        self.assertFalse(verify_password("password123", ""))


class TestTokenIssue(unittest.TestCase):
    def test_token_has_three_segments(self) -> None:
        token = _service().issue(USERNAME, USER_ID)
        self.assertTrue(token)
        self.assertEqual(len(token.split(".")), 3)

    def test_different_identities_get_different_tokens(self) -> None:
        service = _service()
        self.assertNotEqual(service.issue("user1", 1), service.issue("user2", 2))

    def test_same_identity_later_gets_new_token(self) -> None:
        clock = FrozenClock()
        service = _service(clock)
        first = service.issue(USERNAME, USER_ID)
        clock.advance(seconds=5)
        self.assertNotEqual(first, service.issue(USERNAME, USER_ID))

    def test_claims_round_trip(self) -> None:
        clock = FrozenClock()
        service = _service(clock, expire_minutes=30)
        claims = service.decode(service.issue(USERNAME, USER_ID))
        self.assertEqual(claims.username, USERNAME)
        self.assertEqual(claims.user_id, USER_ID)
        self.assertEqual(claims.issued_at, clock.now)
        self.assertEqual(claims.expires_at, clock.now + timedelta(minutes=30))

    def test_repr_hides_secret(self) -> None:
        self.assertNotIn(SECRET, repr(_service()))

    def test_empty_secret_rejected(self) -> None:
        with self.assertRaises(ValueError):
            TokenService(secret="")


class TestTokenVerify(unittest.TestCase):
    def test_valid_token_verifies_for_its_username(self) -> None:
        service = _service()
        self.assertTrue(service.verify(service.issue(USERNAME, USER_ID), USERNAME))

    def test_other_username_does_not_verify(self) -> None:
        service = _service()
        token = service.issue(USERNAME, USER_ID)
        self.assertFalse(service.verify(token, "wronguser"))

    def test_expired_token_fails(self) -> None:
        clock = FrozenClock()
        service = _service(clock, expire_minutes=60)
        token = service.issue(USERNAME, USER_ID)
        clock.advance(minutes=59)
        self.assertTrue(service.verify(token, USERNAME))
        clock.advance(minutes=1)
        self.assertFalse(service.verify(token, USERNAME))

    def test_none_and_empty_token_are_malformed(self) -> None:
        service = _service()
        with self.assertRaises(MalformedTokenError):
            service.verify(None, USERNAME)  # type: ignore[arg-type]
        with self.assertRaises(MalformedTokenError):
            service.verify("", USERNAME)

    def test_wrong_segment_count_is_malformed(self) -> None:
        with self.assertRaises(MalformedTokenError):
            _service().verify("not.a.valid.jwt.token", USERNAME)

    def test_garbage_three_segments_is_malformed(self) -> None:
        with self.assertRaises(MalformedTokenError):
            _service().verify("aaa.bbb.ccc", USERNAME)

    def test_tampered_signature_is_malformed(self) -> None:
        service = _service()
        token = service.issue(USERNAME, USER_ID)
        tampered = token[:-5] + ("XXXXX" if not token.endswith("XXXXX") else "YYYYY")
        with self.assertRaises(MalformedTokenError):
            service.verify(tampered, USERNAME)

    def test_token_signed_with_other_secret_is_malformed(self) -> None:
        other = TokenService(secret="another-signing-secret-0123456789abcdef", clock=FrozenClock())
        token = other.issue(USERNAME, USER_ID)
        with self.assertRaises(MalformedTokenError):
            _service().verify(token, USERNAME)

    def test_malformed_is_an_authentication_error(self) -> None:
        with self.assertRaises(AuthenticationError):
            _service().verify("x.y.z", USERNAME)


class TestTokenExtraction(unittest.TestCase):
    def test_extract_username(self) -> None:
        service = _service()
        self.assertEqual(service.extract_username(service.issue(USERNAME, USER_ID)), USERNAME)

    def test_extract_user_id(self) -> None:
        service = _service()
        self.assertEqual(service.extract_user_id(service.issue(USERNAME, USER_ID)), USER_ID)

    def test_special_characters_in_username(self) -> None:
        service = _service()
        token = service.issue("user@example.com", 99)
        self.assertEqual(service.extract_username(token), "user@example.com")

    def test_large_user_id(self) -> None:
        service = _service()
        large = 2**63 - 1
        self.assertEqual(service.extract_user_id(service.issue(USERNAME, large)), large)

    def test_extract_from_malformed_token_raises(self) -> None:
        service = _service()
        with self.assertRaises(MalformedTokenError):
            service.extract_username("garbage")
        with self.assertRaises(MalformedTokenError):
            service.extract_user_id("a.b.c")

    def test_extract_from_expired_token_raises(self) -> None:
        clock = FrozenClock()
        service = _service(clock, expire_minutes=1)
        token = service.issue(USERNAME, USER_ID)
        clock.advance(minutes=2)
        with self.assertRaises(TokenExpiredError):
            service.extract_username(token)
