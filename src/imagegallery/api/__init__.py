"""Image Gallery — FastAPI REST API layer.

This package contains the FastAPI application and its Pydantic response
models.

Modules
-------
main
    ``create_app()`` factory, route handlers, error mapping, and the
    ``main()`` CLI entry point.
models
    Pydantic models for API responses.
"""
