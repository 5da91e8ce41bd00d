"""Service layer modules (request handling and network I/O).

``api`` holds transport-agnostic handlers; ``server`` exposes them over HTTP.
"""

__all__ = [
    "api",
    "server",
]
