import pytest

from procdisplay import command
from procdisplay.command import CMD_GROUP_GENERAL, CommandInfo, CommandText
from procdisplay.config import KeyConfig, char_key

ALL_COMMANDS = [
    command.move_selection,
    command.selection_to_top_bottom,
    command.filter_submit,
    command.change_tab,
    command.exit_popup,
    command.help,
    command.terminate_process,
    command.sort_list_by_name,
    command.sort_list_by_pid,
    command.sort_list_by_cpu_usage,
    command.sort_list_by_memory_usage,
    command.follow_selection,
    command.more_process_info,
]


@pytest.mark.parametrize("factory", ALL_COMMANDS)
def test_commands_are_general_and_visible(factory):
    text = factory(KeyConfig())
    assert text.group == CMD_GROUP_GENERAL
    assert text.hide_help is False
    assert text.name.endswith("]")


def test_help_text_uses_key_debug_form():
    assert command.help(KeyConfig()).name == "Help [Char('?')]"


def test_exit_popup_text_names_named_key():
    assert command.exit_popup(KeyConfig()).name == "Exit current screen [Esc]"


def test_move_selection_names_both_keys():
    keys = KeyConfig()
    name = command.move_selection(keys).name
    assert name.startswith("Move selection up/down [")
    assert f"[{keys.move_up}/{keys.move_down}]" in name


def test_sort_commands_list_decreasing_key_first():
    keys = KeyConfig()
    name = command.sort_list_by_pid(keys).name
    assert name.index(str(keys.sort_pid_dec)) < name.index(str(keys.sort_pid_inc))


def test_custom_binding_appears_in_text():
    keys = KeyConfig(terminate=char_key("k"))
    assert str(char_key("k")) in command.terminate_process(keys).name


def test_command_info_wraps_text():
    text = CommandText("name", "group")
    info = CommandInfo(text)
    assert info.text == text
    assert info.text.hide_help is False


def test_command_text_ordering():
    assert CommandText("a", "g") < CommandText("b", "g")
    assert CommandText("a", "g") == CommandText("a", "g", False)