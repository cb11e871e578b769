"""FastAPI proxy that keeps the Gemini API key on the server for EconoGraph."""

from .main import app, create_app

__all__ = ["app", "create_app"]
