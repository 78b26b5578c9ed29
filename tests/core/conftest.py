"""Core test fixtures — deterministic view ids and a small content registry.

Design Decisions:
    - Counter-based id factory: tree assertions compare exact view ids
    - One registry shared by linker, preparer, editor and REST tests so the
      same relations resolve the same way across modules
"""

import itertools
from dataclasses import replace

import pytest

from navtree.core.domain_types import ContentType, RelationConfig

LAUNCH_POST_ID = "3f2b8c1e-5a4d-4e6f-9b7a-1c2d3e4f5a6b"


@pytest.fixture
def view_ids():
    """ViewIdFactory yielding view-1, view-2, ..."""
    counter = itertools.count(1)
    return lambda: f"view-{next(counter)}"


@pytest.fixture
def relation_config() -> RelationConfig:
    return RelationConfig(
        content_type_items=(
            {"id": 1, "__collectionName": "pages", "__contentType": "page", "title": "Home"},
            {"id": 2, "__collectionName": "pages", "__contentType": "page", "title": "About"},
            {
                "id": LAUNCH_POST_ID,
                "__collectionName": "blog_posts",
                "__contentType": "blogPost",
                "title": "Launch",
            },
        ),
        content_types=(
            ContentType("page", "pages", "Page", name="page"),
            ContentType("blogPost", "blog_posts", "Blog post"),
        ),
    )


@pytest.fixture
def launch_post_id() -> str:
    return LAUNCH_POST_ID


@pytest.fixture
def overlapping_config(relation_config) -> RelationConfig:
    """Registry where id 1 exists both as a page and as a blog post."""
    return replace(
        relation_config,
        content_type_items=(
            *relation_config.content_type_items,
            {"id": 1, "__collectionName": "blog_posts", "__contentType": "blogPost", "title": "Hello world"},
        ),
    )
