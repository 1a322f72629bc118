"""
sample_tools
~~~~~~~~~~~~

Ready-made tools for demos and tests.
"""
from __future__ import annotations

from typing import List, Optional

import httpx

from tool_processor.models.base_tool import BaseTool

from .file_tools import CommandFailedError, cat_file, cat_file_tool, find_file, find_file_tool
from .weather_tool import WeatherLookupError, WeatherTool

__all__ = [
    "WeatherTool",
    "WeatherLookupError",
    "CommandFailedError",
    "find_file",
    "cat_file",
    "find_file_tool",
    "cat_file_tool",
    "default_tools",
]


def default_tools(client: Optional[httpx.AsyncClient] = None) -> List[BaseTool]:
    """Weather lookup, file search and file read, in that order."""
    return [WeatherTool(client), find_file_tool, cat_file_tool]
