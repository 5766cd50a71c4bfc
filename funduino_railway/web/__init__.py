"""Web control surface for Funduino Railway."""

from .app import create_app

__all__ = ["create_app"]
