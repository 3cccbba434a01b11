"""pytest configuration and shared fixtures."""

import pytest

from valnorm import build_default_coercer


@pytest.fixture
def coercer():
    """Fresh default coercer (isolated from the shared module-level one)."""
    return build_default_coercer()


@pytest.fixture
def sample_record():
    """Untyped record as it might arrive from a form post or CSV row."""
    return {
        "user": {
            "name": "Alice",
            "age": "30",
            "active": "yes",
            "joined": "2024-10-14T15:04:05Z",
            "score": "97.456",
        },
        "events": [
            {"at": "1697297045000", "kind": "login"},
            {"at": "1697297045", "kind": "logout"},
        ],
    }
