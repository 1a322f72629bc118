# tests/sample_tools/test_file_tools.py
import json
import os
from unittest.mock import patch

import pytest

from sample_tools import default_tools
from sample_tools.file_tools import (
    CatFileRequest,
    CommandFailedError,
    FindFileRequest,
    cat_file,
    cat_file_tool,
    find_file,
    find_file_tool,
)


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "test1.py").write_text("print('one')")
    (tmp_path / "test2.py").write_text("print('two')")
    (tmp_path / "notes.txt").write_text("not python")
    (tmp_path / "pkg.py").mkdir()  # directories never match
    return tmp_path


@pytest.mark.asyncio
async def test_find_file(tree):
    result = await find_file(FindFileRequest(directory=str(tree), pattern="*.py"))
    assert sorted(os.path.basename(f) for f in result.files) == ["test1.py", "test2.py"]


@pytest.mark.asyncio
async def test_find_file_no_matches(tree):
    result = await find_file(FindFileRequest(directory=str(tree), pattern="*.rs"))
    assert result.files == []


@pytest.mark.asyncio
async def test_find_file_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        await find_file(FindFileRequest(directory=str(tmp_path / "nope"), pattern="*"))


@pytest.mark.asyncio
async def test_find_file_falls_back_to_glob_when_find_missing(tree):
    with patch("sample_tools.file_tools._run", side_effect=FileNotFoundError("find")):
        result = await find_file(FindFileRequest(directory=str(tree), pattern="test*.py"))
    assert [os.path.basename(f) for f in result.files] == ["test1.py", "test2.py"]


@pytest.mark.asyncio
async def test_find_file_falls_back_to_glob_when_find_fails(tree):
    async def failing_run(*argv):
        return 1, "", "find: something went wrong"

    with patch("sample_tools.file_tools._run", failing_run):
        result = await find_file(FindFileRequest(directory=str(tree), pattern="*.py"))
    assert [os.path.basename(f) for f in result.files] == ["test1.py", "test2.py"]


@pytest.mark.asyncio
async def test_cat_file(tmp_path):
    path = tmp_path / "hello.txt"
    path.write_text("line one\nline two\n", encoding="utf-8")

    result = await cat_file(CatFileRequest(file_path=str(path)))

    assert result.content == "line one\nline two\n"


@pytest.mark.asyncio
async def test_cat_missing_file(tmp_path):
    with pytest.raises(CommandFailedError) as exc_info:
        await cat_file(CatFileRequest(file_path=str(tmp_path / "missing.txt")))
    assert exc_info.value.returncode != 0
    assert "missing.txt" in exc_info.value.stderr


@pytest.mark.asyncio
async def test_tools_round_trip_json(tree):
    found = json.loads(await find_file_tool.invoke(json.dumps({"directory": str(tree), "pattern": "notes.*"})))
    assert [os.path.basename(f) for f in found["files"]] == ["notes.txt"]

    read = json.loads(await cat_file_tool.invoke(json.dumps({"file_path": found["files"][0]})))
    assert read == {"content": "not python"}


def test_default_tools():
    tools = default_tools()
    assert [t.name for t in tools] == ["get_weather", "find_file", "cat_file"]
    assert tools[1].info.parameters.required == ["directory", "pattern"]
