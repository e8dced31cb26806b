"""FastAPI application for the vodgate gateway."""

from vodgate.presentation.api.app import create_app

__all__ = ["create_app"]
