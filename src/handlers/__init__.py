"""Telegram handlers package."""

from .messages import router

__all__ = ["router"]
