"""Tests for the table definitions shared by all models."""

import pytest
from sqlalchemy import inspect
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.schema import CreateTable

from kasboek.infrastructure.persistence.sqlalchemy.models import (
    LedgerTransactionModel,
    RecurringPatternModel,
)


@pytest.mark.parametrize("dialect", [sqlite.dialect(), postgresql.dialect()])
def test_constraint_names_follow_convention(dialect):
    ddl = str(CreateTable(RecurringPatternModel.__table__).compile(dialect=dialect))

    assert "CONSTRAINT pk_recurring_patterns PRIMARY KEY" in ddl
    assert (
        "CONSTRAINT fk_recurring_patterns_account_id_ledger_accounts FOREIGN KEY"
        in ddl
    )


def test_explicit_index_names_are_kept():
    names = {index.name for index in RecurringPatternModel.__table__.indexes}

    assert names == {
        "uq_recurring_patterns_active_merchant",
        "ix_recurring_patterns_account_next",
    }


@pytest.mark.parametrize("model", [LedgerTransactionModel, RecurringPatternModel])
def test_timestamps_are_timezone_aware(model):
    columns = inspect(model).columns

    assert columns["created_at"].type.timezone is True
    assert columns["updated_at"].type.timezone is True
