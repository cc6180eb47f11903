"""
Shared pytest fixtures and configuration for contributor-resolver tests.
"""

import json
from pathlib import Path

import pytest

from core.models import ContributorRecord


# ============================================================================
# Fixtures: Contributor records
# ============================================================================

@pytest.fixture
def email_only_record() -> ContributorRecord:
    """Record with a plain (non no-reply) email and no profile link."""
    return ContributorRecord(name="Alice", email="a@x.com", commits=3)


@pytest.fixture
def profile_url_record() -> ContributorRecord:
    """Record whose handle comes from its profile URL."""
    return ContributorRecord(name="A. Smith", url="https://github.com/alice", commits=2)


@pytest.fixture
def noreply_record() -> ContributorRecord:
    """Record whose handle comes from a no-reply commit email."""
    return ContributorRecord(
        name="Alice Smith",
        email="12345+alice@users.noreply.github.com",
        avatar="https://avatars.githubusercontent.com/u/12345",
        commits=4,
    )


@pytest.fixture
def bot_record() -> ContributorRecord:
    """App account record."""
    return ContributorRecord(
        name="dependabot",
        url="https://github.com/apps/dependabot",
        commits=7,
    )


@pytest.fixture
def raw_history() -> list[dict]:
    """Raw contributor list as produced by a git-history collector."""
    return [
        {"name": "Alice Smith", "email": "12345+alice@users.noreply.github.com", "commits": 4},
        {"name": "Bob", "email": "bob@example.com", "commits": 1},
        {"name": "alice", "url": "https://github.com/alice", "avatar": "https://img/alice.png", "commits": 2},
        {"name": "dependabot[bot]", "url": "https://github.com/apps/dependabot", "commits": 9},
        {"name": "BOB", "email": "BOB@example.com", "commits": 2},
        {"name": ""},
    ]


# ============================================================================
# Fixtures: File Paths
# ============================================================================

@pytest.fixture
def schemas_dir() -> Path:
    """Path to schemas directory."""
    return Path(__file__).parent.parent / "schemas"


@pytest.fixture
def raw_history_file(tmp_path, raw_history) -> Path:
    """raw_history written as a JSON input file."""
    path = tmp_path / "raw.json"
    path.write_text(json.dumps(raw_history), encoding="utf-8")
    return path


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "contract: contract schema compliance tests")
    config.addinivalue_line("markers", "integration: end-to-end integration tests")
    config.addinivalue_line("markers", "unit: unit tests")
