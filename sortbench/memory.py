"""Process memory snapshots and their textual reports."""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from typing import Optional, TextIO

import psutil

RULE = "-" * 58


@dataclass(frozen=True)
class MemInfo:
    """Memory counters of the current process, in bytes."""

    working_set_size: int = 0
    peak_working_set_size: int = 0
    pagefile_usage: int = 0

    def increase_over(self, other: MemInfo) -> MemInfo:
        """Return the growth of each counter since ``other``, never below zero."""
        return MemInfo(
            **{
                field.name: max(0, getattr(self, field.name) - getattr(other, field.name))
                for field in fields(self)
            }
        )


def _peak_resident(memory) -> int:
    peak = getattr(memory, "peak_wset", None)
    if peak is None:
        try:
            import resource
        except ImportError:
            return memory.rss
        max_rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
        peak = max_rss if sys.platform == "darwin" else max_rss * 1024
    return max(peak, memory.rss)


def current_mem_info() -> MemInfo:
    """Measure the current process; raises ``psutil.Error`` if it cannot."""
    memory = psutil.Process().memory_info()
    committed = getattr(memory, "pagefile", None)
    if committed is None:
        committed = memory.vms
    return MemInfo(
        working_set_size=memory.rss,
        peak_working_set_size=_peak_resident(memory),
        pagefile_usage=committed,
    )


def format_mem_usage(info: MemInfo, stage: Optional[str] = None) -> str:
    """Render ``info`` as a framed report, labelled with ``stage`` when given."""
    if stage is None:
        body = [
            "Memory Usage Information:",
            f"Working Set Size: {info.working_set_size // 1024} KB",
            f"Peak Working Set Size: {info.peak_working_set_size // 1024} KB",
            f"Pagefile Usage: {info.pagefile_usage // 1024} KB",
        ]
    else:
        body = [
            f"{stage} Memory Usage Information:",
            f"  Working Set Size    : {info.working_set_size // 1024} KB",
            f"  Peak Working Set Size : {info.peak_working_set_size // 1024} KB",
            f"  Pagefile Usage      : {info.pagefile_usage // 1024} KB",
        ]
    return "\n".join([RULE, *body, RULE]) + "\n"


def show_mem_usage(stage: Optional[str] = None, out: Optional[TextIO] = None) -> MemInfo:
    """Measure memory, write the report to ``out`` and return the snapshot.

    If the process cannot be measured, an error goes to stderr and an
    all-zero snapshot is returned.
    """
    try:
        info = current_mem_info()
    except psutil.Error:
        print("Error: could not read process memory information.", file=sys.stderr)
        return MemInfo()
    (out if out is not None else sys.stdout).write(format_mem_usage(info, stage))
    return info