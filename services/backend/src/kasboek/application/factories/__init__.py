"""Application factories."""

from kasboek.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
