"""Handlers for layout and render requests."""

from .layout import LayoutHandler, LayoutResponse

__all__ = ["LayoutHandler", "LayoutResponse"]
