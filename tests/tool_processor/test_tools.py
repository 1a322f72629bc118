# tests/tool_processor/test_tools.py
import json
import threading

import pytest
from pydantic import BaseModel, ValidationError

from tool_processor.models.base_tool import call_maybe_async, decode_arguments, encode_result
from tool_processor.models.function_tool import FunctionTool
from tool_processor.models.validated_tool import ValidatedTool


class AddReq(BaseModel):
    a: int
    b: int


class AddResp(BaseModel):
    total: int


def add(req: AddReq) -> AddResp:
    return AddResp(total=req.a + req.b)


class MultiplyTool(ValidatedTool):
    """Multiply two numbers."""

    name = "multiply"

    class Arguments(ValidatedTool.Arguments):
        x: float
        y: float

    class Result(ValidatedTool.Result):
        product: float

    async def _execute(self, *, x: float, y: float):
        return {"product": x * y}


class ShoutTool(ValidatedTool):
    name = "shout"
    description = "Upper-case some text"

    class Arguments(ValidatedTool.Arguments):
        text: str

    class Result(ValidatedTool.Result):
        text: str

    def _execute(self, *, text: str):
        return self.Result(text=text.upper())


# ─── helpers ──────────────────────────────────────────────────────────────


def test_decode_arguments():
    assert decode_arguments("t", "") == {}
    assert decode_arguments("t", '{"a": 1}') == {"a": 1}
    with pytest.raises(ValueError, match="not valid JSON"):
        decode_arguments("t", "{")
    with pytest.raises(ValueError, match="JSON object"):
        decode_arguments("t", '"text"')


def test_encode_result():
    assert json.loads(encode_result(AddResp(total=3))) == {"total": 3}
    assert encode_result({"city": "北京"}) == '{"city": "北京"}'
    assert encode_result("plain") == '"plain"'


@pytest.mark.asyncio
async def test_call_maybe_async_threads():
    loop_thread = threading.get_ident()

    async def coro_fn(x):
        return x, threading.get_ident()

    def plain_fn(x):
        return x, threading.get_ident()

    assert await call_maybe_async(coro_fn, 1) == (1, loop_thread)
    value, worker = await call_maybe_async(plain_fn, x=2)
    assert value == 2
    assert worker != loop_thread


# ─── FunctionTool ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_function_tool_invoke():
    tool = FunctionTool("add", "add two integers", add)

    assert tool.name == "add"
    assert tool.info.parameters.required == ["a", "b"]
    assert json.loads(await tool.invoke('{"a": 2, "b": 3}')) == {"total": 5}


@pytest.mark.asyncio
async def test_function_tool_validates_input():
    tool = FunctionTool("add", "add two integers", add)
    with pytest.raises(ValidationError):
        await tool.invoke('{"a": "two"}')


def test_function_tool_requires_single_model_argument():
    def two_args(a: AddReq, b: AddReq):
        pass

    def untyped(req):
        pass

    with pytest.raises(TypeError):
        FunctionTool("x", "x", two_args)
    with pytest.raises(TypeError):
        FunctionTool("x", "x", untyped)


# ─── ValidatedTool ────────────────────────────────────────────────────────


def test_validated_tool_info_built_from_class():
    assert MultiplyTool.info.name == "multiply"
    assert MultiplyTool.info.description == "Multiply two numbers."
    assert MultiplyTool.info.parameters.properties["x"].type == "number"
    assert ShoutTool.info.description == "Upper-case some text"
    assert MultiplyTool().name == "multiply"


@pytest.mark.asyncio
async def test_validated_tool_async_and_sync_execute():
    assert json.loads(await MultiplyTool().invoke('{"x": 2, "y": 4}')) == {"product": 8.0}
    assert await ShoutTool().arun({"text": "hey"}) == {"text": "HEY"}


@pytest.mark.asyncio
async def test_validated_tool_rejects_unknown_arguments():
    with pytest.raises(ValidationError):
        await ShoutTool().arun({"text": "hey", "volume": 11})


def test_validated_tool_must_implement_execute():
    class Unfinished(ValidatedTool):
        name = "unfinished"

    with pytest.raises(TypeError):
        Unfinished()
