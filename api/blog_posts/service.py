"""
Blog post business logic.

Scope:
- request body parsing (raw bytes -> `BlogPostInput`)
- partial-update merge policy
- mapping store results onto the error taxonomy in `core.errors`

Store failures are logged here with their traceback and re-raised as
`StoreFailureError` carrying only a generic message.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from pydantic import ValidationError

from core.errors import (
    BadRequestError,
    NotFoundError,
    RowDecodeError,
    StoreError,
    StoreFailureError,
)

from . import schemas
from .repository import PostStore

POST_NOT_FOUND = "Post not found"
INVALID_INPUT = "Invalid input"
ID_REQUIRED = "ID is required"
POST_DELETED = "Post deleted"

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_input(raw_body: bytes | str) -> schemas.BlogPostInput:
    try:
        return schemas.BlogPostInput.model_validate_json(raw_body)
    except ValidationError as exc:
        logger.info("blog_post_invalid_input errors=%s", exc.error_count())
        raise BadRequestError(INVALID_INPUT) from exc


def merge_field(current: str, incoming: str | None) -> str:
    # Empty means "not sent"; there is no way to clear a field.
    return incoming if incoming else current


class BlogPostService:
    def __init__(self, store: PostStore, *, clock: Callable[[], datetime] = _utc_now) -> None:
        self._store = store
        self._clock = clock

    async def list_posts(self) -> list[schemas.BlogPost]:
        try:
            return await self._store.list_all()
        except RowDecodeError as exc:
            logger.exception("blog_post_list_decode_failed")
            raise StoreFailureError("Failed to parse post") from exc
        except StoreError as exc:
            logger.exception("blog_post_list_failed")
            raise StoreFailureError("Failed to fetch posts") from exc

    async def get_post(self, post_id: str) -> schemas.BlogPost:
        try:
            post = await self._store.get_by_id(post_id)
        except StoreError as exc:
            logger.exception("blog_post_fetch_failed id=%s", post_id)
            raise StoreFailureError("Failed to fetch post") from exc

        if post is None:
            raise NotFoundError(POST_NOT_FOUND)
        return post

    async def create_post(self, raw_body: bytes | str) -> schemas.BlogPost:
        payload = parse_input(raw_body)
        title = payload.title or ""
        description = payload.description or ""
        body = payload.body or ""

        now = self._clock()
        try:
            new_id = await self._store.insert(
                title=title,
                description=description,
                body=body,
                created_at=now,
                updated_at=now,
            )
        except StoreError as exc:
            logger.exception("blog_post_create_failed")
            raise StoreFailureError("Failed to create post") from exc

        logger.info("blog_post_created id=%s", new_id)
        return schemas.BlogPost(
            id=new_id,
            title=title,
            description=description,
            body=body,
            created_at=now,
            updated_at=now,
        )

    async def update_post(self, post_id: str, raw_body: bytes | str) -> schemas.BlogPost:
        """
        Read the row, merge non-empty input fields over it, write it back.

        The read and the write are separate statements, so a concurrent
        update to the same id is silently overwritten (last writer wins).
        """
        if not post_id:
            raise BadRequestError(ID_REQUIRED)

        try:
            existing = await self._store.get_by_id(post_id)
        except StoreError as exc:
            logger.exception("blog_post_update_fetch_failed id=%s", post_id)
            raise StoreFailureError("Failed to retrieve post") from exc
        if existing is None:
            raise NotFoundError(POST_NOT_FOUND)

        payload = parse_input(raw_body)

        merged = existing.model_copy(
            update={
                "title": merge_field(existing.title, payload.title),
                "description": merge_field(existing.description, payload.description),
                "body": merge_field(existing.body, payload.body),
                "updated_at": self._clock(),
            }
        )

        try:
            affected = await self._store.update_fields(
                post_id,
                title=merged.title,
                description=merged.description,
                body=merged.body,
                updated_at=merged.updated_at,
            )
        except StoreError as exc:
            logger.exception("blog_post_update_failed id=%s", post_id)
            raise StoreFailureError("Failed to update post") from exc

        if affected == 0:
            logger.warning("blog_post_update_missed id=%s", post_id)
        else:
            logger.info("blog_post_updated id=%s", merged.id)
        return merged

    async def delete_post(self, post_id: str) -> schemas.DeleteResponse:
        try:
            affected = await self._store.delete_by_id(post_id)
        except StoreError as exc:
            logger.exception("blog_post_delete_failed id=%s", post_id)
            raise StoreFailureError("Failed to delete post") from exc

        if affected == 0:
            raise NotFoundError(POST_NOT_FOUND)

        logger.info("blog_post_deleted id=%s", post_id)
        return schemas.DeleteResponse(message=POST_DELETED)
