"""
FastAPI dependencies for blog post routes.
"""

from __future__ import annotations

from fastapi import Request

from .service import BlogPostService


def get_blog_post_service(request: Request) -> BlogPostService:
    service = getattr(request.app.state, "blog_post_service", None)
    if service is None:
        raise RuntimeError("Blog post service is not initialized. Start the app through its lifespan.")
    return service
