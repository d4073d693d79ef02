"""HTTP service mode for docfreq."""

from .app import create_app, run_service

__all__ = ["create_app", "run_service"]
