# tool_processor/models/base_tool.py
from __future__ import annotations

import asyncio
import functools
import inspect
import json
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict

from pydantic import BaseModel

from tool_processor.models.tool_info import ToolInfo

__all__ = ["BaseTool", "decode_arguments", "encode_result", "call_maybe_async"]


def decode_arguments(tool_name: str, arguments: str) -> Dict[str, Any]:
    """Turn the serialized argument string into a dict (empty string → ``{}``)."""
    if not arguments or not arguments.strip():
        return {}
    try:
        payload = json.loads(arguments)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{tool_name}: arguments are not valid JSON ({exc})") from exc
    if not isinstance(payload, dict):
        raise ValueError(f"{tool_name}: arguments must be a JSON object")
    return payload


def encode_result(value: Any) -> str:
    """Serialize a tool's output for the untyped tool boundary."""
    if isinstance(value, BaseModel):
        return value.model_dump_json()
    return json.dumps(value, ensure_ascii=False, default=str)


async def call_maybe_async(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Await coroutine functions; run plain callables in the default executor."""
    if inspect.iscoroutinefunction(fn):
        return await fn(*args, **kwargs)
    loop = asyncio.get_running_loop()
    raw = await loop.run_in_executor(None, functools.partial(fn, *args, **kwargs))
    # a sync wrapper may still hand back an awaitable
    if inspect.iscoroutine(raw):
        return await raw
    return raw


class BaseTool(ABC):
    """
    Uniform untyped-in / untyped-out boundary around a typed tool.

    Subclasses provide ``info`` and ``arun``; callers use ``invoke`` with the
    raw JSON argument string and get the JSON-encoded result back.
    """
    info: ToolInfo

    @property
    def name(self) -> str:
        return self.info.name

    @abstractmethod
    async def arun(self, payload: Dict[str, Any]) -> Any:
        """Validate ``payload`` against the typed input and run the tool."""

    async def invoke(self, arguments: str) -> str:
        payload = decode_arguments(self.name, arguments)
        result = await self.arun(payload)
        return encode_result(result)

    def __repr__(self) -> str:  # noqa: D401
        return f"<{type(self).__name__} {self.name}>"
