"""Small helpers shared across the base package."""

from .fields import read_field
from .names import is_valid_function_name

__all__ = ["is_valid_function_name", "read_field"]
