"""Equipment registry API package."""

__all__ = []
