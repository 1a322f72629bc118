# tool_processor/models/function_tool.py
from __future__ import annotations

import inspect
import typing
from typing import Any, Callable, Dict, Type

from pydantic import BaseModel

from tool_processor.models.base_tool import BaseTool, call_maybe_async
from tool_processor.models.tool_info import ToolInfo, schema_from_model

__all__ = ["FunctionTool"]


def _input_model(fn: Callable[..., Any]) -> Type[BaseModel]:
    params = list(inspect.signature(fn).parameters.values())
    if len(params) != 1:
        raise TypeError(
            f"{getattr(fn, '__name__', fn)!r} must take exactly one argument "
            f"(a pydantic model), got {len(params)}"
        )
    hints = typing.get_type_hints(fn)
    model = hints.get(params[0].name)
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        raise TypeError(
            f"parameter {params[0].name!r} of {getattr(fn, '__name__', fn)!r} "
            "must be annotated with a pydantic model"
        )
    return model


class FunctionTool(BaseTool):
    """
    Wrap a plain (sync or async) function as a tool.

    The function takes one pydantic model describing its input; the schema
    advertised to the model is derived from that annotation once, here.

    >>> class WeatherReq(BaseModel):
    ...     city: str
    >>> async def get_weather(req: WeatherReq) -> dict: ...
    >>> tool = FunctionTool("get_weather", "Current weather for a city", get_weather)
    """

    def __init__(self, name: str, description: str, fn: Callable[..., Any]):
        self.fn = fn
        self.input_model = _input_model(fn)
        self.info = ToolInfo(
            name=name,
            description=description,
            parameters=schema_from_model(self.input_model),
        )

    async def arun(self, payload: Dict[str, Any]) -> Any:
        req = self.input_model.model_validate(payload)
        return await call_maybe_async(self.fn, req)
