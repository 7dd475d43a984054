from .resolve_url import ResolveUrlUseCase

__all__ = ["ResolveUrlUseCase"]
