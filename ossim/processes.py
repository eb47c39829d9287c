"""Process creation, program execution and shared memory."""

from __future__ import annotations

import multiprocessing
import os
import subprocess
from multiprocessing import shared_memory
from typing import NamedTuple, Union

SHM_SIZE = 1024
DEFAULT_SHARED_TEXT = "Shared Memory Content"
PARENT_MESSAGE = "Hello from parent(Child PID)"


class ChildGreeting(NamedTuple):
    pid: int
    child_message: str
    parent_message: str


def list_directory(path: Union[str, os.PathLike] = ".") -> str:
    """Run ``ls -l`` on a path in a child process and return its output."""
    completed = subprocess.run(
        ["ls", "-l", os.fspath(path)],
        capture_output=True,
        text=True,
        check=True,
    )
    return completed.stdout


def _greet(connection) -> None:
    pid = os.getpid()
    connection.send((pid, f"hello from child (PID : {pid})"))
    connection.close()


def child_greeting() -> ChildGreeting:
    """Start a child process, collect its greeting and wait for it to exit."""
    context = multiprocessing.get_context()
    receiver, sender = context.Pipe(duplex=False)
    child = context.Process(target=_greet, args=(sender,))
    child.start()
    sender.close()
    try:
        pid, message = receiver.recv()
    finally:
        receiver.close()
        child.join()
    if child.exitcode != 0:
        raise OSError(f"child process exited with status {child.exitcode}")
    return ChildGreeting(pid, message, PARENT_MESSAGE)


def shared_memory_roundtrip(text: str = DEFAULT_SHARED_TEXT) -> str:
    """Write text into a new shared memory segment, read it back and remove it.

    The text is stored NUL-terminated, so reading stops at the first NUL.
    """
    data = text.encode("utf-8")
    if len(data) >= SHM_SIZE:
        raise ValueError(f"text needs {len(data)} bytes; segment holds {SHM_SIZE - 1}")
    segment = shared_memory.SharedMemory(create=True, size=SHM_SIZE)
    try:
        segment.buf[: len(data)] = data
        segment.buf[len(data)] = 0
        raw = bytes(segment.buf)
    finally:
        segment.close()
        segment.unlink()
    return raw.split(b"\0", 1)[0].decode("utf-8")