"""Snapshots of CPU and process information taken from the running system."""

from __future__ import annotations

import time
from typing import Any, Optional

import psutil

from procdisplay.bounded_queue import CpuItem
from procdisplay.config import Config
from procdisplay.process_items import ProcessListItem

_PROCESS_ATTRS = [
    "pid",
    "name",
    "cpu_percent",
    "memory_info",
    "create_time",
    "cpu_times",
    "status",
]
_UNNAMED = "No name"
_GLOBAL_NAME = "Global"


def _cpu_frequencies() -> list[int]:
    """Current frequency of each CPU in MHz, or an empty list when unknown."""
    reader = getattr(psutil, "cpu_freq", None)
    if reader is None:
        return []
    try:
        frequencies = reader(percpu=True)
    except (NotImplementedError, OSError, RuntimeError):
        return []
    return [int(freq.current) for freq in frequencies or []]


class SysInfoWrapper:
    """Takes a snapshot of the system on every refresh and reports from it."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config if config is not None else Config()
        self._global_usage = 0.0
        self._cpu_usages: list[float] = []
        self._frequencies: list[int] = []
        self._process_info: list[dict[str, Any]] = []
        self._known_pids: set[int] = set()
        self._core_count: Optional[int] = None
        self._refreshed_at = 0.0
        self.refresh_all()

    def refresh_all(self) -> None:
        """Read fresh CPU and process figures."""
        self._global_usage = float(psutil.cpu_percent(interval=None))
        self._cpu_usages = [float(u) for u in psutil.cpu_percent(interval=None, percpu=True)]
        self._frequencies = _cpu_frequencies()
        self._core_count = psutil.cpu_count(logical=False)
        self._process_info = [
            proc.info for proc in psutil.process_iter(_PROCESS_ATTRS, ad_value=None)
        ]
        self._known_pids = {
            info["pid"] for info in self._process_info if info.get("pid") is not None
        }
        self._refreshed_at = time.time()

    def _frequency(self, index: int) -> int:
        if index < len(self._frequencies):
            return self._frequencies[index]
        if len(self._frequencies) == 1:
            return self._frequencies[0]
        return 0

    def get_cpus(self) -> list[CpuItem]:
        """Global usage as id 0, followed by every logical CPU from id 1."""
        cpus = [CpuItem(id=0, usage=self._global_usage, name=_GLOBAL_NAME)]
        cpus.extend(
            CpuItem(
                id=index + 1,
                usage=usage,
                frequency=self._frequency(index),
                name=f"cpu{index}",
            )
            for index, usage in enumerate(self._cpu_usages)
        )
        return cpus

    def get_processes(self) -> list[ProcessListItem]:
        """One item per process; CPU usage is normalised by the physical core count."""
        cores = self._core_count
        items = []
        for info in self._process_info:
            pid = info.get("pid")
            if pid is None:
                continue
            cpu_usage = float(info.get("cpu_percent") or 0.0)
            if cores:
                cpu_usage /= cores
            memory = info.get("memory_info")
            created = info.get("create_time")
            times = info.get("cpu_times")
            items.append(
                ProcessListItem(
                    pid=pid,
                    name=info.get("name") or _UNNAMED,
                    cpu_usage=cpu_usage,
                    memory_usage=memory.rss if memory is not None else 0,
                    start_time=int(created) if created else 0,
                    run_time=max(int(self._refreshed_at - created), 0) if created else 0,
                    accumulated_cpu_time=(
                        int((times.user + times.system) * 1000) if times is not None else 0
                    ),
                    status=info.get("status") or "",
                )
            )
        return items

    def terminate_process(self, pid: int) -> bool:
        """Kill a process seen in the last snapshot; True when the signal was sent."""
        if pid not in self._known_pids:
            return False
        try:
            psutil.Process(pid).kill()
        except (psutil.Error, ValueError, OverflowError):
            return False
        return True