"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands and API")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def rng():
    """Seeded random source so option order is repeatable."""
    return random.Random(1234)


@pytest.fixture
def cash_flow_module():
    """A finance module with enough text for content-derived questions."""
    return {
        "title": "Mastering Cash Flow",
        "description": (
            "Cash flow forecasting helps a small business plan payroll and supplier payments. "
            "A cash flow statement records money moving in and out of the business each month. "
            "Positive cash flow means the business collects more money than it spends. "
            "Forecasting early warns owners about shortfalls before invoices fall due."
        ),
        "category": "finance",
    }


@pytest.fixture
def business_plan_module():
    """The business-planning module used by the learning catalog."""
    return {
        "title": "How to Create a Winning Business Plan",
        "description": "Learn to craft a comprehensive business plan that attracts investors.",
        "category": "business-plan",
    }


@pytest.fixture
def sample_mcq():
    """Provide a sample multiple-choice question payload (camelCase, as the UI sends it)."""
    return {
        "id": "q-test",
        "type": "multiple_choice",
        "question": "Which statement shows money moving in and out of a business?",
        "options": [
            "Balance sheet",
            "Cash flow statement",
            "Org chart",
            "Mission statement",
        ],
        "correctAnswer": 1,
        "explanation": "The cash flow statement tracks inflows and outflows.",
    }
