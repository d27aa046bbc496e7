"""FastAPI application for authorfocus."""

from authorfocus.api.app import create_app

__all__ = ["create_app"]
