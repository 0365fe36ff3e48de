"""Descriptions of the key commands shown in the help popup."""

from __future__ import annotations

from dataclasses import dataclass

from procdisplay.config import KeyConfig

CMD_GROUP_GENERAL = "-- General --"


@dataclass(frozen=True, order=True)
class CommandText:
    name: str
    group: str
    hide_help: bool = False


@dataclass(frozen=True)
class CommandInfo:
    text: CommandText


def _general(name: str) -> CommandText:
    return CommandText(name, CMD_GROUP_GENERAL)


def move_selection(key: KeyConfig) -> CommandText:
    return _general(f"Move selection up/down [{key.move_up}/{key.move_down}]")


def selection_to_top_bottom(key: KeyConfig) -> CommandText:
    return _general(f"Move selection to top/bottom [{key.move_top}/{key.move_bottom}]")


def filter_submit(key: KeyConfig) -> CommandText:
    return _general(f"Filter/Submit filter [{key.filter}/{key.enter}]")


def change_tab(key: KeyConfig) -> CommandText:
    return _general(f"Move tab left/right [{key.tab_left}/{key.tab_right}]")


def exit_popup(key: KeyConfig) -> CommandText:
    return _general(f"Exit current screen [{key.exit_popup}]")


def help(key: KeyConfig) -> CommandText:
    return _general(f"Help [{key.open_help}]")


def terminate_process(key: KeyConfig) -> CommandText:
    return _general(f"Terminate selected process [{key.terminate}]")


def sort_list_by_name(key: KeyConfig) -> CommandText:
    return _general(f"Sort by name dec/inc [{key.sort_name_dec}/{key.sort_name_inc}]")


def sort_list_by_pid(key: KeyConfig) -> CommandText:
    return _general(f"Sort by PID dec/inc [{key.sort_pid_dec}/{key.sort_pid_inc}]")


def sort_list_by_cpu_usage(key: KeyConfig) -> CommandText:
    return _general(
        f"Sort by cpu usage dec/inc [{key.sort_cpu_usage_dec}/{key.sort_cpu_usage_inc}]"
    )


def sort_list_by_memory_usage(key: KeyConfig) -> CommandText:
    return _general(
        f"Sort by memory usage dec/inc "
        f"[{key.sort_memory_usage_dec}/{key.sort_memory_usage_inc}]"
    )


def follow_selection(key: KeyConfig) -> CommandText:
    return _general(f"Toggle follow selection [{key.follow_selection}]")


def more_process_info(key: KeyConfig) -> CommandText:
    return _general(f"Get more process information [{key.process_info}]")