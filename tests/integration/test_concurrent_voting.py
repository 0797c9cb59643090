"""
Concurrent voting scenarios.

Each worker opens its own session, the way each request does in the app, so
these tests exercise the store's transaction serialization:
- No vote is lost when many voters hit one project at once
- A double-click from one voter never leaves duplicate rows
- The cached counter always equals the number of vote rows
"""
import pytest
from concurrent.futures import ThreadPoolExecutor, as_completed

from showcase.services.identity import AnonymousIdentity, AuthenticatedIdentity
from showcase.services.vote import toggle_vote
from tests.utils import (
    assert_counter_consistent,
    count_vote_rows,
    create_user,
    get_vote_count,
)


def _toggle(database, project_id, identity):
    with database.session() as db:
        return toggle_vote(db, project_id, identity)


@pytest.mark.integration
@pytest.mark.concurrency
class TestConcurrentVoting:
    """Test concurrent toggles against a file-backed database."""

    def test_many_visitors_vote_at_once(self, database, project_id):
        """20 browsers voting at the same moment all count."""
        visitors = [AnonymousIdentity(visitor_id=f"visitor-{i}") for i in range(20)]

        results = []
        with ThreadPoolExecutor(max_workers=10) as executor:
            futures = [executor.submit(_toggle, database, project_id, v) for v in visitors]
            for future in as_completed(futures):
                results.append(future.result())

        assert all(r.voted for r in results)
        assert sorted(r.vote_count for r in results) == list(range(1, 21))
        assert get_vote_count(database, project_id) == 20
        assert_counter_consistent(database, project_id)

    def test_two_identities_both_count(self, database, project_id, voter_id):
        identities = [
            AnonymousIdentity(visitor_id="visitor-abc"),
            AuthenticatedIdentity(user_id=voter_id, visitor_id="user-browser"),
        ]

        with ThreadPoolExecutor(max_workers=2) as executor:
            results = list(executor.map(lambda i: _toggle(database, project_id, i), identities))

        assert [r.voted for r in results] == [True, True]
        assert get_vote_count(database, project_id) == 2
        assert_counter_consistent(database, project_id)

    def test_double_click_from_one_visitor(self, database, project_id):
        """
        Three simultaneous toggles from one browser apply one after another:
        cast, withdraw, cast.
        """
        visitor = AnonymousIdentity(visitor_id="double-clicker")

        with ThreadPoolExecutor(max_workers=3) as executor:
            futures = [executor.submit(_toggle, database, project_id, visitor) for _ in range(3)]
            results = [future.result() for future in futures]

        assert sorted(r.voted for r in results) == [False, True, True]
        assert count_vote_rows(database, project_id) == 1
        assert_counter_consistent(database, project_id)

    def test_double_click_from_one_user(self, database, project_id):
        user_id = create_user(database, user_id="clicker", nickname="Clicker")
        user = AuthenticatedIdentity(user_id=user_id, visitor_id="clicker-browser")

        with ThreadPoolExecutor(max_workers=2) as executor:
            futures = [executor.submit(_toggle, database, project_id, user) for _ in range(2)]
            results = [future.result() for future in futures]

        assert sorted(r.voted for r in results) == [False, True]
        assert count_vote_rows(database, project_id) == 0
        assert get_vote_count(database, project_id) == 0

    def test_mixed_voters_and_retractions(self, database, project_id):
        """Voters 0-9 vote, then voters 0-4 retract while 10-14 vote."""
        for i in range(10):
            _toggle(database, project_id, AnonymousIdentity(visitor_id=f"v-{i}"))

        identities = [AnonymousIdentity(visitor_id=f"v-{i}") for i in range(15) if i < 5 or i >= 10]
        with ThreadPoolExecutor(max_workers=10) as executor:
            list(executor.map(lambda i: _toggle(database, project_id, i), identities))

        assert get_vote_count(database, project_id) == 10
        assert_counter_consistent(database, project_id)
