"""Service test fixtures — FastAPI test client and a shared registry payload.

Invariants:
    - The app under test is the real navtree.main app (same routers, same handlers)
    - Registry fixtures are plain JSON, exactly what the editing UI sends

Design Decisions:
    - httpx AsyncClient over ASGITransport: no server process, no network
"""

import pytest
from httpx import ASGITransport, AsyncClient

from navtree.main import app


@pytest.fixture
async def client():
    """FastAPI test client bound to the ASGI app."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def config_payload() -> dict:
    return {
        "contentTypes": [
            {"contentTypeName": "page", "collectionName": "pages",
             "labelSingular": "Page", "name": "page"},
        ],
        "contentTypeItems": [
            {"id": 1, "__collectionName": "pages", "__contentType": "page", "title": "Home"},
            {"id": 2, "__collectionName": "pages", "__contentType": "page", "title": "About"},
        ],
    }


@pytest.fixture
def persisted_items() -> list[dict]:
    return [
        {
            "id": 1, "title": "Home", "type": "INTERNAL", "path": "/", "order": 1,
            "related": [{"id": 1, "__contentType": "page", "title": "Home"}],
            "items": [
                {"id": 3, "title": "GitHub", "type": "EXTERNAL",
                 "externalPath": "https://github.com", "order": 1},
            ],
        },
        {"id": 2, "title": "About", "type": "INTERNAL", "path": "/about"},
    ]
