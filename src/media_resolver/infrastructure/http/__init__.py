from __future__ import annotations

from .transport import HttpxGraphQLTransport

__all__ = ["HttpxGraphQLTransport"]
