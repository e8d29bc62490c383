"""
Web application package for the engine.

Provides a FastAPI-based REST API for playing against the engine over
HTTP. Run with: uvicorn web.app:app
"""
