"""MCP tools for reviewing and creating Anki cards."""

from .catalog import TOOL_NAMES, TOOLS
from .handler import ToolHandler, decode_tool_call

__all__ = ["TOOL_NAMES", "TOOLS", "ToolHandler", "decode_tool_call"]
