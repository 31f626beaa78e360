"""Shared fixtures for the token top-up report tests."""

import json
from pathlib import Path
from typing import Any, Callable

import pytest

import config
from models.schemas import CompanyRecord, UserRecord


def make_user(**overrides: Any) -> dict[str, Any]:
    """Build a valid raw user entry."""
    user = {
        "id": 1,
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "company_id": 1,
        "email_status": True,
        "active_status": True,
        "tokens": 10,
    }
    user.update(overrides)
    return user


def make_company(**overrides: Any) -> dict[str, Any]:
    """Build a valid raw company entry."""
    company = {
        "id": 1,
        "name": "Acme",
        "top_up": 5,
        "email_status": True,
    }
    company.update(overrides)
    return company


@pytest.fixture
def user_factory() -> Callable[..., UserRecord]:
    """Create validated user records."""
    return lambda **overrides: UserRecord(**make_user(**overrides))


@pytest.fixture
def company_factory() -> Callable[..., CompanyRecord]:
    """Create validated company records."""
    return lambda **overrides: CompanyRecord(**make_company(**overrides))


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a value as JSON into the temporary directory."""

    def _write(name: str, value: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(value), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def acme_users() -> list[dict[str, Any]]:
    """Users of the Acme example: one emailed, one not."""
    return [
        make_user(id=1, last_name="Zed", first_name="A", email="a@x.com",
                  email_status=True, tokens=10),
        make_user(id=2, last_name="Ant", first_name="B", email="b@x.com",
                  email_status=False, tokens=20),
    ]


@pytest.fixture
def acme_companies() -> list[dict[str, Any]]:
    """The single Acme company."""
    return [make_company(id=1, name="Acme", top_up=5, email_status=True)]


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep log files out of the working directory."""
    logs = tmp_path / "logs"
    monkeypatch.setattr(config, "LOGS_FOLDER", str(logs))
    return logs
