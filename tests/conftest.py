import os

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    os.environ["ENV"] = "test"
    os.environ["JUPITER_API_BASE_URL"] = "https://jupiter.test"
    os.environ["JUPITER_API_KEY"] = "test-key"
    os.environ["OBSERVABILITY_ENABLED"] = "false"

    from app.core.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def cooking_payload():
    return [
        {
            "mint": "MintA111111111111111111111111111111111111111",
            "name": "Alpha",
            "symbol": "ALP",
            "decimals": 6,
            "icon": "https://img.test/alpha.png",
            "organicScore": 87.5,
            "holders": 1200,
            "contents": [
                {
                    "contentId": "c-1",
                    "contentType": "tweet",
                    "content": "  alpha is cooking  ",
                    "submittedBy": {"username": "degen"},
                    "url": "https://x.com/degen/status/1",
                    "postedAt": "2025-01-01T00:00:00Z",
                    "updatedAt": "2025-01-01T01:00:00Z",
                },
                {"text": "   "},
            ],
            "tokenSummary": {
                "summaryFull": "Alpha full summary",
                "summaryShort": "Alpha short",
                "citations": ["https://a.test/1"],
                "updatedAt": "2025-01-02T00:00:00Z",
            },
        },
        {
            "mint": "MintB222222222222222222222222222222222222222",
            "contents": [{"text": "beta post", "submittedBy": "anon"}],
            "newsSummary": {"summaryShort": "Beta in the news"},
        },
    ]


@pytest.fixture
def client(setup_test_env):
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client
