"""Streaming helpers for reassembling function calls from chunked responses."""

from .function_assembler import FunctionCallAssembler

__all__ = ["FunctionCallAssembler"]
