"""In-process tool registry and dispatch."""

from .router import SimpleToolRouter, ToolHandler

__all__ = ["SimpleToolRouter", "ToolHandler"]
