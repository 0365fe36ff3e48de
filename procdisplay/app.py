"""The application: the CPU and process panels, popups and key routing."""

from __future__ import annotations

import enum
from typing import Optional

from procdisplay import command
from procdisplay.command import CommandInfo
from procdisplay.component import EventState, Rect
from procdisplay.config import Config, KeyCode
from procdisplay.cpu import CPUComponent
from procdisplay.error import ErrorComponent
from procdisplay.help import HelpComponent
from procdisplay.process_component import ProcessComponent
from procdisplay.sysinfo import SysInfoWrapper

_COMMANDS = (
    command.help,
    command.exit_popup,
    command.change_tab,
    command.move_selection,
    command.selection_to_top_bottom,
    command.follow_selection,
    command.sort_list_by_name,
    command.sort_list_by_pid,
    command.sort_list_by_cpu_usage,
    command.sort_list_by_memory_usage,
    command.filter_submit,
    command.terminate_process,
)


class MainFocus(enum.Enum):
    CPU = "cpu"
    PROCESS = "process"


class App:
    """Owns the panels and routes key presses and refreshes to them.

    ``system`` supplies the data; it needs ``refresh_all``, ``get_cpus``,
    ``get_processes`` and ``terminate_process`` like :class:`SysInfoWrapper`.
    """

    def __init__(self, config: Optional[Config] = None, system=None) -> None:
        self.config = config if config is not None else Config()
        self._system = system if system is not None else SysInfoWrapper(self.config)
        self._system.refresh_all()
        self._focus = MainFocus.PROCESS
        self._expand = False
        self._process = ProcessComponent(self.config, self._system.get_processes())
        self._cpu = CPUComponent(self.config)
        self._cpu.update(self._system.get_cpus())
        self._help = HelpComponent(self.config)
        self.error = ErrorComponent(self.config)

    def refresh_event(self) -> EventState:
        """Read the system again and feed the panels."""
        self._system.refresh_all()
        self._process.update(self._system.get_processes())
        self._cpu.update(self._system.get_cpus())
        self._help.set_commands(self.commands())
        return EventState.CONSUMED

    def key_event(self, key: KeyCode) -> EventState:
        if self._component_event(key).is_consumed():
            return EventState.CONSUMED
        if self._move_focus(key).is_consumed():
            return EventState.CONSUMED
        keys = self.config.key_config
        if key == keys.expand:
            self._expand = not self._expand
            return EventState.CONSUMED
        if key == keys.terminate:
            pid = self._process.selected_pid()
            if pid is not None:
                self._system.terminate_process(pid)
            return EventState.CONSUMED
        return EventState.NOT_CONSUMED

    def _component_event(self, key: KeyCode) -> EventState:
        if self.error.event(key).is_consumed():
            return EventState.CONSUMED
        if self._help.event(key).is_consumed():
            return EventState.CONSUMED
        focused = self._cpu if self._focus is MainFocus.CPU else self._process
        return focused.event(key)

    def _move_focus(self, key: KeyCode) -> EventState:
        if key != self.config.key_config.tab:
            return EventState.NOT_CONSUMED
        self._focus = MainFocus.PROCESS if self._focus is MainFocus.CPU else MainFocus.CPU
        return EventState.CONSUMED

    @property
    def expanded(self) -> bool:
        return self._expand

    @property
    def focus(self) -> MainFocus:
        return self._focus

    def commands(self) -> list[CommandInfo]:
        """The commands listed in the help popup."""
        keys = self.config.key_config
        return [CommandInfo(build(keys)) for build in _COMMANDS]

    def draw(self, screen) -> None:
        area = screen.size
        self.error.draw(screen, area, False)
        if self._expand:
            focused = self._process if self._focus is MainFocus.PROCESS else self._cpu
            focused.draw(screen, area, True)
        else:
            cpu_area, process_area = area.split_vertical(0.25, 0.75)
            self._process.draw(screen, process_area, self._focus is MainFocus.PROCESS)
            self._cpu.draw(screen, cpu_area, self._focus is MainFocus.CPU)
        self._help.draw(screen, Rect(), False)