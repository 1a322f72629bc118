"""
sample_tools/file_tools.py
~~~~~~~~~~~~~~~~~~~~~~~~~~

Filesystem helpers exposed as tools: ``find_file`` shells out to
``find`` (falling back to a glob when that fails) and ``cat_file`` to
``cat``.
"""
from __future__ import annotations

import asyncio
import glob
import logging
import os
from typing import List, Tuple

from pydantic import BaseModel, Field

from tool_processor.models.function_tool import FunctionTool

logger = logging.getLogger(__name__)

__all__ = [
    "CommandFailedError",
    "FindFileRequest",
    "FindFileResult",
    "CatFileRequest",
    "CatFileResult",
    "find_file",
    "cat_file",
    "find_file_tool",
    "cat_file_tool",
]


class CommandFailedError(RuntimeError):
    def __init__(self, command: str, returncode: int, stderr: str):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"{command} exited with {returncode}: {stderr.strip()}")


class FindFileRequest(BaseModel):
    directory: str = Field(..., description="Directory to search in")
    pattern: str = Field(..., description="File name pattern, e.g. *.py or test*.py")


class FindFileResult(BaseModel):
    files: List[str] = Field(default_factory=list, description="Matching file paths")


class CatFileRequest(BaseModel):
    file_path: str = Field(..., description="Path of the file to read")


class CatFileResult(BaseModel):
    content: str = Field(..., description="File contents")


async def _run(*argv: str) -> Tuple[int, str, str]:
    proc = await asyncio.create_subprocess_exec(
        *argv,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await proc.communicate()
    return (
        proc.returncode,
        stdout.decode("utf-8", errors="replace"),
        stderr.decode("utf-8", errors="replace"),
    )


def _glob_files(directory: str, pattern: str) -> List[str]:
    matches = glob.glob(os.path.join(directory, pattern))
    return sorted(m for m in matches if os.path.isfile(m))


async def find_file(req: FindFileRequest) -> FindFileResult:
    if not os.path.exists(req.directory):
        raise FileNotFoundError(f"directory does not exist: {req.directory}")

    try:
        code, out, err = await _run("find", req.directory, "-name", req.pattern, "-type", "f")
    except OSError as exc:
        logger.debug("find unavailable (%s); using glob", exc)
        return FindFileResult(files=_glob_files(req.directory, req.pattern))

    if code != 0:
        logger.debug("find exited with %s (%s); using glob", code, err.strip())
        return FindFileResult(files=_glob_files(req.directory, req.pattern))

    return FindFileResult(files=[line for line in out.splitlines() if line])


async def cat_file(req: CatFileRequest) -> CatFileResult:
    code, out, err = await _run("cat", req.file_path)
    if code != 0:
        raise CommandFailedError(f"cat {req.file_path}", code, err)
    return CatFileResult(content=out)


find_file_tool = FunctionTool(
    "find_file",
    "Search a directory for files whose name matches a pattern; returns the matching paths",
    find_file,
)

cat_file_tool = FunctionTool(
    "cat_file",
    "Read a file and return its contents",
    cat_file,
)
