"""HTTP API of Kasboek: app factory, dependencies, routers and schemas."""

from kasboek.presentation.api.app import create_app

__all__ = ["create_app"]
