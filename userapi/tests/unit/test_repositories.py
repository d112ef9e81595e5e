"""Unit tests for repositories."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from userapi.models.domain import SEED_USERS, User
from userapi.repositories.identity import IdentityAllocator
from userapi.repositories.user_repository import UserRepository


def make_user(name="frank", id=0):
    return User(id=id, username=name, email=f"{name}@example.com", age=33, password="secret1")


class TestIdentityAllocator:
    """Test monotonic id allocation."""

    def test_starts_after_start_value(self):
        allocator = IdentityAllocator(start=3)

        assert allocator.next_id() == 4
        assert allocator.next_id() == 5
        assert allocator.last_id == 5

    def test_concurrent_ids_are_unique_and_gapless(self):
        allocator = IdentityAllocator()

        with ThreadPoolExecutor(max_workers=16) as pool:
            ids = list(pool.map(lambda _: allocator.next_id(), range(500)))

        assert sorted(ids) == list(range(1, 501))


class TestUserRepository:
    """Test UserRepository in-memory operations."""

    def test_seeded(self, user_repo):
        assert user_repo.count() == 3
        assert {u.id for u in user_repo.list()} == {1, 2, 3}
        assert user_repo.get(1).username == "Alice"

    def test_get_missing(self, user_repo):
        assert user_repo.get(99) is None

    def test_create_ignores_supplied_id(self, user_repo):
        created = user_repo.create(make_user(id=2))

        assert created.id == 4
        assert user_repo.get(2).username == "Bob"
        assert user_repo.get(4) == created

    def test_create_ids_strictly_increase(self, user_repo):
        ids = [user_repo.create(make_user(f"user{i}")).id for i in range(5)]

        assert ids == sorted(ids)
        assert min(ids) > max(u.id for u in SEED_USERS)

    def test_ids_not_reused_after_delete(self, user_repo):
        created = user_repo.create(make_user())
        assert user_repo.delete(created.id) is True

        again = user_repo.create(make_user())
        assert again.id == created.id + 1

    def test_update_forces_path_id(self, user_repo):
        updated = user_repo.update(2, make_user("bobby", id=77))

        assert updated.id == 2
        assert user_repo.get(2).username == "bobby"
        assert user_repo.get(77) is None

    def test_update_missing_does_not_mutate(self, user_repo):
        assert user_repo.update(42, make_user()) is None
        assert user_repo.count() == 3
        assert not user_repo.exists(42)

    def test_delete_is_idempotent(self, user_repo):
        assert user_repo.delete(1) is True
        assert user_repo.delete(1) is False
        assert not user_repo.exists(1)
        assert user_repo.get(1) is None

    def test_list_is_snapshot(self, user_repo):
        snapshot = user_repo.list()
        user_repo.create(make_user())

        assert len(snapshot) == 3
        assert user_repo.count() == 4

    def test_allocator_behind_seed_rejected(self):
        with pytest.raises(ValueError, match="reissue"):
            UserRepository(seed=SEED_USERS, allocator=IdentityAllocator(start=1))

    def test_concurrent_creates(self, user_repo):
        with ThreadPoolExecutor(max_workers=20) as pool:
            created = list(pool.map(lambda i: user_repo.create(make_user(f"u{i}")), range(100)))

        ids = [u.id for u in created]
        assert len(set(ids)) == 100
        assert min(ids) > 3
        assert user_repo.count() == 103

    def test_concurrent_updates_same_id_leave_one_winner(self, user_repo):
        names = [f"writer{i}" for i in range(50)]

        with ThreadPoolExecutor(max_workers=10) as pool:
            list(pool.map(lambda n: user_repo.update(1, make_user(n)), names))

        final = user_repo.get(1)
        assert final.id == 1
        assert final.username in names
        assert final.email == f"{final.username}@example.com"

    def test_concurrent_delete_reports_single_success(self, user_repo):
        with ThreadPoolExecutor(max_workers=10) as pool:
            outcomes = list(pool.map(lambda _: user_repo.delete(3), range(20)))

        assert outcomes.count(True) == 1
        assert not user_repo.exists(3)
