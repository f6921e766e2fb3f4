"""
Blog post persistence (raw SQL over an asyncpg pool).

`PostStore` is the only place that talks to the `blog_posts` table. It never
raises for "no such row": lookups return None and writes return the affected
row count. Driver failures come out as `core.errors.StoreError`.
"""

from __future__ import annotations

import asyncio
import re
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Iterator

import asyncpg

from core import db
from core.errors import RowDecodeError, StoreError

from .schemas import BlogPost

_COLUMNS = "id, title, description, body, created_at, updated_at"

_BIGINT_MIN = -(2**63)
_BIGINT_MAX = 2**63 - 1
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

_DRIVER_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    asyncpg.exceptions.InternalClientError,
    OSError,
    asyncio.TimeoutError,
)


def parse_post_id(post_id: str | int | None) -> int | None:
    """
    Turn a path id into a BIGINT, or None when it cannot name any row.

    Empty, non-numeric and out-of-range ids simply match nothing.
    """
    if isinstance(post_id, int):
        value = post_id
    else:
        raw = (post_id or "").strip()
        if not _ID_PATTERN.fullmatch(raw):
            return None
        value = int(raw)
    if value < _BIGINT_MIN or value > _BIGINT_MAX:
        return None
    return value


@contextmanager
def _driver_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except _DRIVER_ERRORS as exc:
        raise StoreError(f"{operation} failed: {exc}") from exc


def _row_to_post(row: Any) -> BlogPost:
    try:
        return BlogPost(
            id=int(row["id"]),
            title=str(row["title"] or ""),
            description=str(row["description"] or ""),
            body=str(row["body"] or ""),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise RowDecodeError(f"Could not decode blog_posts row: {exc}") from exc


class PostStore:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    async def list_all(self) -> list[BlogPost]:
        with _driver_errors("list_all"):
            rows = await self._pool.fetch(
                f"""
                SELECT {_COLUMNS}
                FROM blog_posts
                ORDER BY id
                """
            )
        return [_row_to_post(r) for r in rows]

    async def get_by_id(self, post_id: str | int) -> BlogPost | None:
        row_id = parse_post_id(post_id)
        if row_id is None:
            return None

        with _driver_errors("get_by_id"):
            row = await self._pool.fetchrow(
                f"""
                SELECT {_COLUMNS}
                FROM blog_posts
                WHERE id = $1
                """,
                row_id,
            )
        return _row_to_post(row) if row is not None else None

    async def insert(
        self,
        *,
        title: str,
        description: str,
        body: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> int:
        with _driver_errors("insert"):
            new_id = await self._pool.fetchval(
                """
                INSERT INTO blog_posts (title, description, body, created_at, updated_at)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING id
                """,
                title,
                description,
                body,
                created_at,
                updated_at,
            )
        if new_id is None:
            raise StoreError("insert returned no id.")
        return int(new_id)

    async def update_fields(
        self,
        post_id: str | int,
        *,
        title: str,
        description: str,
        body: str,
        updated_at: datetime,
    ) -> int:
        row_id = parse_post_id(post_id)
        if row_id is None:
            return 0

        with _driver_errors("update_fields"):
            status = await self._pool.execute(
                """
                UPDATE blog_posts
                SET title = $1,
                    description = $2,
                    body = $3,
                    updated_at = $4
                WHERE id = $5
                """,
                title,
                description,
                body,
                updated_at,
                row_id,
            )
        return db.affected_rows(status)

    async def delete_by_id(self, post_id: str | int) -> int:
        row_id = parse_post_id(post_id)
        if row_id is None:
            return 0

        with _driver_errors("delete_by_id"):
            status = await self._pool.execute(
                """
                DELETE FROM blog_posts
                WHERE id = $1
                """,
                row_id,
            )
        return db.affected_rows(status)
