# tool_processor/models/validated_tool.py
"""
Class-based tools with validated arguments and results.

    class WeatherTool(ValidatedTool):
        name = "get_weather"

        class Arguments(ValidatedTool.Arguments):
            city: str

        class Result(ValidatedTool.Result):
            weather: str
            temp: int

        async def _execute(self, *, city: str) -> Result:
            ...

``info`` is built once, when the subclass is defined.
"""
from __future__ import annotations

import inspect
from abc import abstractmethod
from typing import Any, ClassVar, Dict

from pydantic import BaseModel, ConfigDict

from tool_processor.models.base_tool import BaseTool, call_maybe_async
from tool_processor.models.tool_info import ToolInfo, schema_from_model

__all__ = ["ValidatedTool"]


class ValidatedTool(BaseTool):
    """Base class for tools declaring nested ``Arguments`` / ``Result`` models."""

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""

    class Arguments(BaseModel):
        model_config = ConfigDict(extra="forbid")

    class Result(BaseModel):
        pass

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.name:
            return
        cls.info = ToolInfo(
            name=cls.name,
            description=cls.description or inspect.getdoc(cls) or "",
            parameters=schema_from_model(cls.Arguments),
        )

    @abstractmethod
    def _execute(self, **kwargs: Any) -> Any:
        """Run the tool on validated keyword arguments; sync or async."""

    async def arun(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        args = self.Arguments(**payload)
        raw = await call_maybe_async(self._execute, **args.model_dump())
        if isinstance(raw, self.Result):
            return raw.model_dump()
        return self.Result(**raw).model_dump()
