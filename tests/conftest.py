"""Shared test fixtures for the blog post API."""

from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Make `api/` importable the same way the app runs (`from core import db`).
api_path = Path(__file__).parent.parent / "api"
sys.path.insert(0, str(api_path))

from blog_posts.schemas import BlogPost  # noqa: E402
from core.errors import RowDecodeError, StoreError  # noqa: E402
from blog_posts.repository import parse_post_id  # noqa: E402


class TickingClock:
    """Returns a strictly increasing UTC time on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.current = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


class FakePostStore:
    """
    In-memory stand-in for `PostStore`.

    Mirrors the real store's contract: ids never reused, missing rows are
    None / 0, and `fail_on` makes the named operation raise `StoreError`.
    """

    def __init__(self) -> None:
        self.rows: dict[int, BlogPost] = {}
        self.next_id = 1
        self.calls: list[str] = []
        self.fail_on: set[str] = set()
        self.decode_error = False

    def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail_on:
            raise StoreError(f"{operation} failed: connection refused")

    async def list_all(self) -> list[BlogPost]:
        self._enter("list_all")
        if self.decode_error:
            raise RowDecodeError("Could not decode blog_posts row")
        return [self.rows[k] for k in sorted(self.rows)]

    async def get_by_id(self, post_id):
        self._enter("get_by_id")
        row_id = parse_post_id(post_id)
        if row_id is None:
            return None
        return self.rows.get(row_id)

    async def insert(self, *, title, description, body, created_at, updated_at) -> int:
        self._enter("insert")
        new_id = self.next_id
        self.next_id += 1
        self.rows[new_id] = BlogPost(
            id=new_id,
            title=title,
            description=description,
            body=body,
            created_at=created_at,
            updated_at=updated_at,
        )
        return new_id

    async def update_fields(self, post_id, *, title, description, body, updated_at) -> int:
        self._enter("update_fields")
        row_id = parse_post_id(post_id)
        if row_id is None or row_id not in self.rows:
            return 0
        self.rows[row_id] = self.rows[row_id].model_copy(
            update={"title": title, "description": description, "body": body, "updated_at": updated_at}
        )
        return 1

    async def delete_by_id(self, post_id) -> int:
        self._enter("delete_by_id")
        row_id = parse_post_id(post_id)
        if row_id is None or row_id not in self.rows:
            return 0
        del self.rows[row_id]
        return 1


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def store() -> FakePostStore:
    return FakePostStore()


@pytest.fixture
def service(store, clock):
    from blog_posts.service import BlogPostService

    return BlogPostService(store, clock=clock)


@pytest.fixture
def client(service):
    """TestClient wired to the fake store; the DB lifespan never runs."""
    from fastapi.testclient import TestClient

    from blog_posts.dependencies import get_blog_post_service
    from main import app

    app.dependency_overrides[get_blog_post_service] = lambda: service
    # Without a `with` block TestClient skips lifespan, so no pool is opened.
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()
