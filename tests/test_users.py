"""Tests for the in-memory user registry."""
import threading

from users import UserRecord, UserRegistry


class TestUserRecord:

    def test_from_json(self):
        assert UserRecord.from_json({"username": "a", "password": "p"}) == UserRecord("a", "p")

    def test_from_json_ignores_extra_fields(self):
        record = UserRecord.from_json({"username": "a", "password": "p", "email": "a@example.com"})
        assert record.to_dict() == {"username": "a", "password": "p"}

    def test_from_json_missing_field(self):
        assert UserRecord.from_json({"username": "a"}) is None
        assert UserRecord.from_json({"password": "p"}) is None


class TestUserRegistry:

    def test_lookup_on_empty_registry(self, registry):
        assert registry.lookup("a", "p") is None
        assert len(registry) == 0

    def test_add_then_lookup(self, registry):
        user = UserRecord("a", "p")
        assert registry.add(user) is True
        assert registry.lookup("a", "p") == user

    def test_lookup_needs_both_fields(self, registry):
        registry.add(UserRecord("a", "p"))
        assert registry.lookup("a", "wrong") is None
        assert registry.lookup("b", "p") is None

    def test_username_is_case_sensitive(self, registry):
        registry.add(UserRecord("Ann", "p"))
        assert registry.lookup("ann", "p") is None
        assert registry.add(UserRecord("ann", "q")) is True
        assert len(registry) == 2

    def test_duplicate_username_keeps_original(self, registry):
        registry.add(UserRecord("a", "p"))
        assert registry.add(UserRecord("a", "other")) is False
        assert registry.lookup("a", "other") is None
        assert registry.lookup("a", "p") == UserRecord("a", "p")
        assert len(registry) == 1

    def test_same_password_for_different_users(self, registry):
        registry.add(UserRecord("a", "p"))
        registry.add(UserRecord("b", "p"))
        assert registry.lookup("b", "p") == UserRecord("b", "p")

    def test_concurrent_signups_store_username_once(self):
        registry = UserRegistry()
        barrier = threading.Barrier(16)
        results = []

        def signup(i):
            barrier.wait()
            results.append(registry.add(UserRecord("race", f"p{i}")))

        threads = [threading.Thread(target=signup, args=(i,)) for i in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(registry) == 1
        assert results.count(True) == 1
