"""
Pytest fixtures for the REGU-AI test suite.

Provides:
- the staged chart of accounts and a fresh seeded ledger per test
- a valid General Journal form
- fake OpenAI-style async clients for the summary client
"""

from datetime import date
from types import SimpleNamespace

import pytest

from regu_ai.config.reference_data import ACCOUNT_CHART, INITIAL_ENTRIES
from regu_ai.core.ledger.ledger import LedgerManager
from regu_ai.core.ledger.validator import EntryForm


@pytest.fixture
def chart():
    return ACCOUNT_CHART


@pytest.fixture
def ledger(chart):
    return LedgerManager(chart, INITIAL_ENTRIES)


@pytest.fixture
def empty_ledger(chart):
    return LedgerManager(chart)


@pytest.fixture
def valid_form():
    return EntryForm(
        date=date(2023, 10, 5),
        description="Terima BPJS",
        reference="REF-002",
        debit_account="1101",
        credit_account="4101",
        amount="1500000",
    )


# =============================================================================
# Fake OpenAI client
# =============================================================================


class FakeCompletions:
    def __init__(self, content=None, error=None, response=None):
        self.content = content
        self.error = error
        self.response = response
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeAsyncClient:
    def __init__(self, **kwargs):
        self.completions = FakeCompletions(**kwargs)
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture
def fake_client_factory():
    return FakeAsyncClient
