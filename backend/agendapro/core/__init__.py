# Core package initialization
# Cross-cutting concerns shared by every layer.

from . import auth_decorators, cache, config, exceptions, notifications, security

__all__ = [
    "auth_decorators",
    "cache",
    "config",
    "exceptions",
    "notifications",
    "security",
]
