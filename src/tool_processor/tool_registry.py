# tool_processor/tool_registry.py
from typing import Dict, Iterable, List, Optional, Protocol

from tool_processor.models.base_tool import BaseTool
from tool_processor.models.tool_info import ToolInfo


class ToolRegistryInterface(Protocol):
    """
    Protocol for a tool registry. Implementations should allow registering tools
    and retrieving them by name.
    """
    def register_tool(self, tool: BaseTool) -> None:
        ...

    def get_tool(self, name: str) -> Optional[BaseTool]:
        ...

    def list_tools(self) -> List[str]:
        ...


class InMemoryToolRegistry:
    """
    In-memory implementation of ToolRegistryInterface.

    Tool names are unique; registration order is preserved so the tool list
    advertised to a model is stable.
    """
    def __init__(self, tools: Iterable[BaseTool] = ()):
        self._tools: Dict[str, BaseTool] = {}
        for tool in tools:
            self.register_tool(tool)

    def register_tool(self, tool: BaseTool) -> None:
        """
        Register a tool implementation under ``tool.info.name``.

        Raises:
            ValueError: a tool with the same name is already registered.
        """
        key = tool.info.name
        if key in self._tools:
            raise ValueError(f"Tool {key!r} is already registered")
        self._tools[key] = tool

    def get_tool(self, name: str) -> Optional[BaseTool]:
        """
        Retrieve a registered tool by name.
        """
        return self._tools.get(name)

    def list_tools(self) -> List[str]:
        """
        List all registered tool names.
        """
        return list(self._tools.keys())

    def tool_infos(self) -> List[ToolInfo]:
        """Descriptors of every registered tool, in registration order."""
        return [tool.info for tool in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
