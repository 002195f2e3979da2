"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from statements.domain import Performance, PerformanceSummary, Play, PlayId


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def plays() -> dict[str, Play]:
    return {
        "hamlet": Play(name="Hamlet", type="tragedy"),
        "as-like": Play(name="As You Like It", type="comedy"),
        "othello": Play(name="Othello", type="tragedy"),
    }


@pytest.fixture
def big_co_summary() -> PerformanceSummary:
    return PerformanceSummary(
        customer="BigCo",
        performances=(
            Performance(play_id=PlayId("hamlet"), audience=55),
            Performance(play_id=PlayId("as-like"), audience=35),
            Performance(play_id=PlayId("othello"), audience=40),
        ),
    )


@pytest.fixture
def big_co_payload() -> dict:
    return {
        "customer": "BigCo",
        "performances": [
            {"playID": "hamlet", "audience": 55},
            {"playID": "as-like", "audience": 35},
            {"playID": "othello", "audience": 40},
        ],
        "plays": {
            "hamlet": {"name": "Hamlet", "type": "tragedy"},
            "as-like": {"name": "As You Like It", "type": "comedy"},
            "othello": {"name": "Othello", "type": "tragedy"},
        },
    }
