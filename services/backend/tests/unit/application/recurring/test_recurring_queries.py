"""Tests for the recurring pattern queries."""

from datetime import date
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from kasboek.application.queries.recurring import (
    GetRecurringPatternQuery,
    LinkedTransactionsQuery,
    ListRecurringPatternsQuery,
    RecurringSummaryQuery,
    UpcomingRecurringQuery,
)
from kasboek.domain.recurring.exceptions import (
    AccountNotFoundError,
    InvalidFrequencyError,
    RecurringPatternNotFoundError,
)
from kasboek.domain.recurring.value_objects import Frequency, TransactionType
from tests.shared.fixtures.factories import (
    TestAccountFactory,
    TestPatternFactory,
    TestTransactionFactory,
    fixed_today,
)

ACCOUNT_ID = TestAccountFactory.CHECKING_ID


@pytest.fixture
def account_repo():
    repo = AsyncMock()
    repo.exists.return_value = True
    return repo


@pytest.fixture
def pattern_repo():
    return AsyncMock()


class TestListRecurringPatternsQuery:
    """Filtering rules of the list query."""

    @pytest.mark.asyncio
    async def test_lists_all_patterns_by_default(self, account_repo, pattern_repo):
        patterns = [TestPatternFactory.pattern()]
        pattern_repo.find_by_account.return_value = patterns
        query = ListRecurringPatternsQuery(account_repo, pattern_repo)

        assert await query.execute(ACCOUNT_ID) == patterns
        pattern_repo.find_by_account.assert_awaited_once_with(ACCOUNT_ID)

    @pytest.mark.asyncio
    async def test_active_only(self, account_repo, pattern_repo):
        pattern_repo.find_active_by_account.return_value = []
        query = ListRecurringPatternsQuery(account_repo, pattern_repo)

        await query.execute(ACCOUNT_ID, active_only=True)

        pattern_repo.find_active_by_account.assert_awaited_once_with(ACCOUNT_ID)
        pattern_repo.find_by_account.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_active_only_false_lists_everything(self, account_repo, pattern_repo):
        pattern_repo.find_by_account.return_value = []
        query = ListRecurringPatternsQuery(account_repo, pattern_repo)

        await query.execute(ACCOUNT_ID, active_only=False)

        pattern_repo.find_by_account.assert_awaited_once_with(ACCOUNT_ID)

    @pytest.mark.asyncio
    async def test_frequency_filter_then_active_filter(self, account_repo, pattern_repo):
        active = TestPatternFactory.pattern()
        inactive = TestPatternFactory.pattern(is_active=False)
        pattern_repo.find_by_account_and_frequency.return_value = [active, inactive]
        query = ListRecurringPatternsQuery(account_repo, pattern_repo)

        result = await query.execute(ACCOUNT_ID, frequency="Monthly", active_only=True)

        assert result == [active]
        pattern_repo.find_by_account_and_frequency.assert_awaited_once_with(
            ACCOUNT_ID,
            Frequency.MONTHLY,
        )

    @pytest.mark.asyncio
    async def test_invalid_frequency(self, account_repo, pattern_repo):
        query = ListRecurringPatternsQuery(account_repo, pattern_repo)

        with pytest.raises(InvalidFrequencyError):
            await query.execute(ACCOUNT_ID, frequency="fortnightly")

    @pytest.mark.asyncio
    async def test_unknown_account(self, account_repo, pattern_repo):
        account_repo.exists.return_value = False
        query = ListRecurringPatternsQuery(account_repo, pattern_repo)

        with pytest.raises(AccountNotFoundError):
            await query.execute(TestAccountFactory.UNKNOWN_ID)


class TestGetRecurringPatternQuery:
    @pytest.mark.asyncio
    async def test_returns_pattern_of_account(self, pattern_repo):
        pattern = TestPatternFactory.pattern()
        pattern_repo.find_by_id.return_value = pattern

        result = await GetRecurringPatternQuery(pattern_repo).execute(
            pattern.id,
            ACCOUNT_ID,
        )

        assert result is pattern

    @pytest.mark.asyncio
    async def test_other_account_is_not_found(self, pattern_repo):
        pattern = TestPatternFactory.pattern()
        pattern_repo.find_by_id.return_value = pattern

        with pytest.raises(RecurringPatternNotFoundError):
            await GetRecurringPatternQuery(pattern_repo).execute(
                pattern.id,
                TestAccountFactory.SAVINGS_ID,
            )


class TestRecurringSummaryQuery:
    """Counts, totals and frequency grouping."""

    @pytest.mark.asyncio
    async def test_summary(self, account_repo, pattern_repo):
        pattern_repo.find_by_account.return_value = [
            TestPatternFactory.pattern(predicted_amount=1299),
            TestPatternFactory.pattern(merchant_key="huur", predicted_amount=95000),
            TestPatternFactory.pattern(
                merchant_key="salaris",
                predicted_amount=320000,
                transaction_type=TransactionType.CREDIT,
            ),
            TestPatternFactory.pattern(
                merchant_key="gym",
                predicted_amount=2999,
                is_active=False,
            ),
            TestPatternFactory.pattern(
                merchant_key="schoonmaak",
                predicted_amount=2500,
                frequency=Frequency.WEEKLY,
            ),
        ]
        query = RecurringSummaryQuery(account_repo, pattern_repo)

        summary = await query.summary(ACCOUNT_ID)

        assert summary.total == 5
        assert summary.active == 4
        assert summary.monthly_debit == 1299 + 95000
        assert summary.monthly_credit == 320000
        assert summary.monthly_net == 320000 - 96299

    @pytest.mark.asyncio
    async def test_summary_of_empty_account(self, account_repo, pattern_repo):
        pattern_repo.find_by_account.return_value = []
        query = RecurringSummaryQuery(account_repo, pattern_repo)

        summary = await query.summary(ACCOUNT_ID)

        assert summary.to_dict() == {
            "total": 0,
            "active": 0,
            "monthly_debit": 0,
            "monthly_credit": 0,
        }

    @pytest.mark.asyncio
    async def test_grouped_by_frequency_has_every_key(self, account_repo, pattern_repo):
        weekly = TestPatternFactory.pattern(frequency=Frequency.WEEKLY)
        monthly = TestPatternFactory.pattern()
        pattern_repo.find_active_by_account.return_value = [weekly, monthly]
        query = RecurringSummaryQuery(account_repo, pattern_repo)

        grouped = await query.grouped_by_frequency(ACCOUNT_ID)

        assert set(grouped) == set(Frequency)
        assert grouped[Frequency.WEEKLY] == [weekly]
        assert grouped[Frequency.MONTHLY] == [monthly]
        assert grouped[Frequency.YEARLY] == []

    @pytest.mark.asyncio
    async def test_grouped_including_inactive(self, account_repo, pattern_repo):
        pattern_repo.find_by_account.return_value = []
        query = RecurringSummaryQuery(account_repo, pattern_repo)

        await query.grouped_by_frequency(ACCOUNT_ID, active_only=False)

        pattern_repo.find_by_account.assert_awaited_once_with(ACCOUNT_ID)
        pattern_repo.find_active_by_account.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_account(self, account_repo, pattern_repo):
        account_repo.exists.return_value = False
        query = RecurringSummaryQuery(account_repo, pattern_repo)

        with pytest.raises(AccountNotFoundError):
            await query.summary(TestAccountFactory.UNKNOWN_ID)


class TestUpcomingRecurringQuery:
    """Upcoming and overdue views."""

    @pytest.mark.asyncio
    async def test_upcoming_window(self, account_repo, pattern_repo):
        pattern = TestPatternFactory.pattern(last_occurrence_date=date(2024, 6, 1))
        pattern_repo.find_upcoming.return_value = [pattern]
        query = UpcomingRecurringQuery(account_repo, pattern_repo, today=fixed_today)

        (payment,) = await query.upcoming(ACCOUNT_ID, days=30)

        pattern_repo.find_upcoming.assert_awaited_once_with(
            ACCOUNT_ID,
            date(2024, 6, 15),
            date(2024, 7, 15),
        )
        assert payment.pattern_id == pattern.id
        assert payment.expected_date == date(2024, 7, 1)
        assert payment.days_until == 16
        assert not payment.is_overdue

    @pytest.mark.asyncio
    async def test_overdue(self, account_repo, pattern_repo):
        pattern = TestPatternFactory.pattern(last_occurrence_date=date(2024, 5, 1))
        pattern_repo.find_overdue.return_value = [pattern]
        query = UpcomingRecurringQuery(account_repo, pattern_repo, today=fixed_today)

        (payment,) = await query.overdue(ACCOUNT_ID)

        pattern_repo.find_overdue.assert_awaited_once_with(ACCOUNT_ID, date(2024, 6, 15))
        assert payment.expected_date == date(2024, 5, 31)
        assert payment.days_until == -15
        assert payment.is_overdue

    @pytest.mark.asyncio
    async def test_unknown_account(self, account_repo, pattern_repo):
        account_repo.exists.return_value = False
        query = UpcomingRecurringQuery(account_repo, pattern_repo, today=fixed_today)

        with pytest.raises(AccountNotFoundError):
            await query.upcoming(TestAccountFactory.UNKNOWN_ID)


class TestLinkedTransactionsQuery:
    """Transactions matched back to a pattern."""

    @pytest.mark.asyncio
    async def test_matches_key_and_direction(self, pattern_repo):
        pattern = TestPatternFactory.pattern()
        pattern_repo.find_by_id.return_value = pattern
        netflix = TestTransactionFactory.monthly(count=3, description="Netflix")
        newest_first = list(reversed(netflix))
        transaction_repo = AsyncMock()
        transaction_repo.list_for_account.return_value = [
            *newest_first,
            TestTransactionFactory.transaction(description="Spotify"),
            TestTransactionFactory.transaction(
                description="Netflix",
                transaction_type=TransactionType.CREDIT,
            ),
            TestTransactionFactory.transaction(
                description="Netflix",
                parent_transaction_id=uuid4(),
            ),
        ]
        query = LinkedTransactionsQuery(pattern_repo, transaction_repo)

        result = await query.execute(pattern.id, ACCOUNT_ID)

        assert [t.id for t in result] == [t.id for t in newest_first]
        assert result[0].date == date(2024, 6, 1)
        assert result[0].amount == 1299

    @pytest.mark.asyncio
    async def test_limit(self, pattern_repo):
        pattern = TestPatternFactory.pattern()
        pattern_repo.find_by_id.return_value = pattern
        transaction_repo = AsyncMock()
        transaction_repo.list_for_account.return_value = list(
            reversed(TestTransactionFactory.monthly(count=30)),
        )
        query = LinkedTransactionsQuery(pattern_repo, transaction_repo)

        result = await query.execute(pattern.id, ACCOUNT_ID)

        assert len(result) == 20

        limited = await query.execute(pattern.id, ACCOUNT_ID, limit=5)

        assert len(limited) == 5

    @pytest.mark.asyncio
    async def test_missing_pattern(self, pattern_repo):
        pattern_repo.find_by_id.return_value = None
        query = LinkedTransactionsQuery(pattern_repo, AsyncMock())

        with pytest.raises(RecurringPatternNotFoundError):
            await query.execute(uuid4(), ACCOUNT_ID)
