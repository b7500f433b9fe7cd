"""Command handlers for the tapsmith CLI."""

from .auth import AuthHandler
from .base import BaseCommandHandler
from .new import NewHandler
from .update import UpdateHandler

__all__ = ["AuthHandler", "BaseCommandHandler", "NewHandler", "UpdateHandler"]
