"""
FastAPI router for blog post endpoints.

Request bodies are read raw and handed to the service, which decides when to
parse them (update parses only after the row has been found).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from . import schemas
from .dependencies import get_blog_post_service
from .service import BlogPostService

router = APIRouter(prefix="/api/blog-post")

_INPUT_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": schemas.BlogPostInput.model_json_schema()}},
    }
}


def _errors(*codes: int) -> dict:
    return {code: {"model": schemas.ErrorResponse} for code in codes}


@router.get(
    "",
    summary="Get all blog posts",
    response_model=list[schemas.BlogPost],
    responses=_errors(500),
)
async def list_blog_posts(
    service: BlogPostService = Depends(get_blog_post_service),
) -> list[schemas.BlogPost]:
    return await service.list_posts()


@router.get(
    "/{post_id}",
    summary="Get a single blog post",
    response_model=schemas.BlogPost,
    responses=_errors(404, 500),
)
async def get_blog_post(
    post_id: str,
    service: BlogPostService = Depends(get_blog_post_service),
) -> schemas.BlogPost:
    return await service.get_post(post_id)


@router.post(
    "",
    summary="Create a new blog post",
    status_code=status.HTTP_201_CREATED,
    response_model=schemas.BlogPost,
    responses=_errors(400, 500),
    openapi_extra=_INPUT_BODY,
)
async def create_blog_post(
    request: Request,
    service: BlogPostService = Depends(get_blog_post_service),
) -> schemas.BlogPost:
    return await service.create_post(await request.body())


@router.patch(
    "/{post_id}",
    summary="Update an existing blog post",
    response_model=schemas.BlogPost,
    responses=_errors(400, 404, 500),
    openapi_extra=_INPUT_BODY,
)
async def update_blog_post(
    post_id: str,
    request: Request,
    service: BlogPostService = Depends(get_blog_post_service),
) -> schemas.BlogPost:
    """
    Only non-empty fields in the body replace stored values.
    """
    return await service.update_post(post_id, await request.body())


@router.delete(
    "/{post_id}",
    summary="Delete a blog post",
    response_model=schemas.DeleteResponse,
    responses=_errors(404, 500),
)
async def delete_blog_post(
    post_id: str,
    service: BlogPostService = Depends(get_blog_post_service),
) -> schemas.DeleteResponse:
    return await service.delete_post(post_id)
