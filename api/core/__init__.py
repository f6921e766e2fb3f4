"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that features use (DB pool wiring,
settings, logging, error types). Keep feature-specific SQL and business logic
in the corresponding feature package (e.g. `blog_posts/`).
"""
