"""
DevConnect API package.

The FastAPI application lives in ``api.app`` (``api.app:app`` for uvicorn).
It is not imported here, so module routers can depend on
``api.dependencies`` without importing the whole application.
"""
