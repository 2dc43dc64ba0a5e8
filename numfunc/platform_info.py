# numfunc/platform_info.py
"""
Process-identity explorer.

This is a demo routine, not part of the reusable toolkit. The OS lookups sit
behind the two-method PlatformInfo protocol so tests can pass a fake and the
arithmetic / closure / higher-order modules never import this one.

Every running program gets a process id (PID) from the OS. The parent
process id (PPID) is the PID of whoever started it. Each process has its own
memory space, so the object identities printed below mean nothing outside
this process.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Optional, Protocol, TextIO


class PlatformInfo(Protocol):
    def pid(self) -> int: ...

    def ppid(self) -> int: ...


class OsPlatformInfo:
    """PlatformInfo backed by the os module."""

    def pid(self) -> int:
        return os.getpid()

    def ppid(self) -> int:
        return os.getppid()


@dataclass(frozen=True, slots=True)
class ProcessReport:
    pid: int
    ppid: int
    container_id: int
    first_element_id: int


def explore_process(
    info: Optional[PlatformInfo] = None,
    out: Optional[TextIO] = None,
) -> ProcessReport:
    """
    Print current / parent process ids and two object identities.

    container_id is id() of a five-element list; first_element_id is id() of
    its first element. They differ because the list object only holds
    references; the ints it refers to are separate objects.
    """
    if info is None:
        info = OsPlatformInfo()
    if out is None:
        out = sys.stdout

    pid = info.pid()
    ppid = info.ppid()

    print(f"Current Process ID: {pid}", file=out)
    print(f"Parent Process ID: {ppid}", file=out)

    data = [1, 2, 3, 4, 5]
    container_id = id(data)
    first_element_id = id(data[0])

    print(f"Identity of the list object: {container_id:#x}", file=out)
    print(f"Identity of the first element: {first_element_id:#x}", file=out)
    print("Note: Other processes cannot access these objects due to process isolation.", file=out)
    print(file=out)

    return ProcessReport(
        pid=pid,
        ppid=ppid,
        container_id=container_id,
        first_element_id=first_element_id,
    )
