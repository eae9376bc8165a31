"""
Seyali Status Service Package.

This package contains the HTTP service reporting liveness, a greeting and
backing-service configuration status.

Subpackages:
    api: FastAPI route definitions.
    core: Configuration, constants and database setup.
    exception_handlers: Global and HTTP error handlers.
    middleware: Request tracing, rate limiting and security headers.
    models: SQLModel table definitions.
    services: Payload builders and request dependencies.
"""
