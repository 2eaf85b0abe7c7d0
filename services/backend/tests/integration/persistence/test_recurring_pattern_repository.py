"""Tests for RecurringPatternRepositorySQLAlchemy against SQLite."""

from datetime import date

import pytest

from kasboek.domain.recurring.exceptions import (
    DuplicateActivePatternError,
    PatternPersistenceError,
)
from kasboek.domain.recurring.value_objects import Frequency, TransactionType
from kasboek.infrastructure.persistence.sqlalchemy.repositories import (
    RecurringPatternRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import TestAccountFactory, TestPatternFactory

ACCOUNT_ID = TestAccountFactory.CHECKING_ID
OTHER_ACCOUNT_ID = TestAccountFactory.SAVINGS_ID


@pytest.fixture
def repo(test_db_session) -> RecurringPatternRepositorySQLAlchemy:
    return RecurringPatternRepositorySQLAlchemy(test_db_session)


class TestSaveAndFind:
    """Single pattern round trips."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_id(self, repo):
        pattern = TestPatternFactory.pattern(
            frequency=Frequency.QUARTERLY,
            occurrence_count=4,
            amount_variance_percent=4.5,
        )

        await repo.save(pattern)
        found = await repo.find_by_id(pattern.id)

        assert found is not None
        assert found.id == pattern.id
        assert found.merchant_key == "netflix"
        assert found.frequency == Frequency.QUARTERLY
        assert found.transaction_type == TransactionType.DEBIT
        assert found.predicted_amount == 1299
        assert found.amount_variance_percent == 4.5
        assert found.last_occurrence_date == date(2024, 6, 1)
        assert found.next_expected_date == pattern.next_expected_date
        assert found.is_active

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, repo):
        assert await repo.find_by_id(TestAccountFactory.UNKNOWN_ID) is None

    @pytest.mark.asyncio
    async def test_save_updates_existing(self, repo):
        pattern = TestPatternFactory.pattern()
        await repo.save(pattern)

        pattern.rename("Netflix HD")
        pattern.deactivate()
        await repo.save(pattern)
        found = await repo.find_by_id(pattern.id)

        assert found.display_name == "Netflix HD"
        assert not found.is_active

    @pytest.mark.asyncio
    async def test_find_active(self, repo):
        pattern = TestPatternFactory.pattern()
        await repo.save(pattern)

        found = await repo.find_active(ACCOUNT_ID, "netflix", TransactionType.DEBIT)
        other_direction = await repo.find_active(
            ACCOUNT_ID,
            "netflix",
            TransactionType.CREDIT,
        )
        other_account = await repo.find_active(
            OTHER_ACCOUNT_ID,
            "netflix",
            TransactionType.DEBIT,
        )

        assert found.id == pattern.id
        assert other_direction is None
        assert other_account is None


class TestActiveUniqueness:
    """At most one active pattern per account, merchant and direction."""

    @pytest.mark.asyncio
    async def test_second_active_pattern_is_rejected(self, repo):
        first = TestPatternFactory.pattern()
        await repo.save(first)

        with pytest.raises(DuplicateActivePatternError):
            await repo.save(TestPatternFactory.pattern())

        # The failed write is rolled back to its savepoint only
        assert await repo.find_by_id(first.id) is not None
        assert len(await repo.find_by_account(ACCOUNT_ID)) == 1

    @pytest.mark.asyncio
    async def test_inactive_duplicates_are_allowed(self, repo):
        old = TestPatternFactory.pattern(is_active=False)
        older = TestPatternFactory.pattern(is_active=False)
        current = TestPatternFactory.pattern()

        await repo.save(old)
        await repo.save(older)
        await repo.save(current)

        assert len(await repo.find_by_account(ACCOUNT_ID)) == 3
        assert len(await repo.find_active_by_account(ACCOUNT_ID)) == 1

    @pytest.mark.asyncio
    async def test_same_merchant_other_direction_or_account(self, repo):
        await repo.save(TestPatternFactory.pattern())
        await repo.save(TestPatternFactory.pattern(transaction_type=TransactionType.CREDIT))
        await repo.save(TestPatternFactory.pattern(account_id=OTHER_ACCOUNT_ID))

        assert len(await repo.find_active_by_account(ACCOUNT_ID)) == 2
        assert len(await repo.find_active_by_account(OTHER_ACCOUNT_ID)) == 1


class TestBulkWrites:
    """save_all, replace_all_for_account and delete_all_for_account."""

    @pytest.mark.asyncio
    async def test_save_all_orders_by_next_expected_date(self, repo):
        later = TestPatternFactory.pattern(
            merchant_key="huur",
            last_occurrence_date=date(2024, 6, 10),
        )
        sooner = TestPatternFactory.pattern(last_occurrence_date=date(2024, 6, 1))

        await repo.save_all([later, sooner])
        patterns = await repo.find_by_account(ACCOUNT_ID)

        assert [p.id for p in patterns] == [sooner.id, later.id]

    @pytest.mark.asyncio
    async def test_save_all_empty_is_noop(self, repo):
        await repo.save_all([])

        assert await repo.find_by_account(ACCOUNT_ID) == []

    @pytest.mark.asyncio
    async def test_save_all_is_all_or_nothing(self, repo):
        existing = TestPatternFactory.pattern()
        await repo.save(existing)

        with pytest.raises(PatternPersistenceError):
            await repo.save_all(
                [
                    TestPatternFactory.pattern(merchant_key="huur"),
                    TestPatternFactory.pattern(),
                ],
            )

        patterns = await repo.find_by_account(ACCOUNT_ID)
        assert [p.id for p in patterns] == [existing.id]

    @pytest.mark.asyncio
    async def test_replace_all_for_account(self, repo):
        await repo.save_all(
            [
                TestPatternFactory.pattern(),
                TestPatternFactory.pattern(merchant_key="huur", is_active=False),
            ],
        )
        untouched = TestPatternFactory.pattern(account_id=OTHER_ACCOUNT_ID)
        await repo.save(untouched)
        replacement = TestPatternFactory.pattern()

        removed = await repo.replace_all_for_account(ACCOUNT_ID, [replacement])

        assert removed == 2
        patterns = await repo.find_by_account(ACCOUNT_ID)
        assert [p.id for p in patterns] == [replacement.id]
        assert await repo.find_by_id(untouched.id) is not None

    @pytest.mark.asyncio
    async def test_replace_all_with_nothing_clears(self, repo):
        await repo.save(TestPatternFactory.pattern())

        removed = await repo.replace_all_for_account(ACCOUNT_ID, [])

        assert removed == 1
        assert await repo.find_by_account(ACCOUNT_ID) == []

    @pytest.mark.asyncio
    async def test_delete_all_for_account(self, repo):
        await repo.save_all(
            [
                TestPatternFactory.pattern(),
                TestPatternFactory.pattern(merchant_key="huur"),
            ],
        )

        assert await repo.delete_all_for_account(ACCOUNT_ID) == 2
        assert await repo.find_by_account(ACCOUNT_ID) == []


class TestFilteredFinders:
    """Frequency, upcoming and overdue lookups."""

    @pytest.mark.asyncio
    async def test_find_by_account_and_frequency(self, repo):
        monthly = TestPatternFactory.pattern()
        weekly = TestPatternFactory.pattern(
            merchant_key="schoonmaak",
            frequency=Frequency.WEEKLY,
            occurrence_count=8,
        )
        await repo.save_all([monthly, weekly])

        result = await repo.find_by_account_and_frequency(ACCOUNT_ID, Frequency.WEEKLY)

        assert [p.id for p in result] == [weekly.id]

    @pytest.mark.asyncio
    async def test_find_upcoming_is_inclusive_and_active_only(self, repo):
        # next expected dates: 2024-06-15, 2024-07-01, 2024-07-16, 2024-06-20
        on_start = TestPatternFactory.pattern(
            merchant_key="a",
            last_occurrence_date=date(2024, 5, 16),
        )
        inside = TestPatternFactory.pattern(merchant_key="b")
        outside = TestPatternFactory.pattern(
            merchant_key="c",
            last_occurrence_date=date(2024, 6, 16),
        )
        inactive = TestPatternFactory.pattern(
            merchant_key="d",
            last_occurrence_date=date(2024, 5, 21),
            is_active=False,
        )
        await repo.save_all([on_start, inside, outside, inactive])

        result = await repo.find_upcoming(
            ACCOUNT_ID,
            date(2024, 6, 15),
            date(2024, 7, 15),
        )

        assert [p.id for p in result] == [on_start.id, inside.id]

    @pytest.mark.asyncio
    async def test_find_overdue(self, repo):
        overdue = TestPatternFactory.pattern(
            merchant_key="a",
            last_occurrence_date=date(2024, 5, 1),
        )
        due_today = TestPatternFactory.pattern(
            merchant_key="b",
            last_occurrence_date=date(2024, 5, 16),
        )
        await repo.save_all([overdue, due_today])

        result = await repo.find_overdue(ACCOUNT_ID, date(2024, 6, 15))

        assert [p.id for p in result] == [overdue.id]
