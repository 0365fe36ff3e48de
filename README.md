# procdisplay

A terminal process monitor built on curses. It shows a live, scrollable list
of running processes alongside a chart of global and per-core CPU usage over
the last minute. System figures are read with psutil.

## Installation

```
pip install procdisplay
```

## Running

```
procdisplay
```

Options:

| Option                | Meaning                                          |
|-----------------------|--------------------------------------------------|
| `--refresh-rate MS`   | How often system figures are re-read (default 2000) |
| `--tick-rate MS`      | How long each wait for a key lasts (default 250) |

Both values must be positive.

The screen has two panels: the CPU chart at the top (with a list of
`All`, `Global` and `CPU n` beside it) and the process list below, with a
filter box under it. `Tab` moves focus between the panels, and `e` expands
the focused panel to fill the screen. `Esc` closes a popup; when nothing uses
it, it quits.

### Keys

| Key            | Action                                              |
|----------------|-----------------------------------------------------|
| `Up` / `Down`  | Move selection (process list or CPU list)           |
| `W` / `S`      | Move selection to top / bottom of the process list  |
| `/` , `Enter`  | Start typing a filter / submit it                   |
| `Backspace`    | Delete the last filter character                    |
| `f`            | Toggle follow selection                             |
| `n` / `N`      | Sort by name ascending / descending                 |
| `p` / `P`      | Sort by PID ascending / descending                  |
| `c` / `C`      | Sort by CPU usage ascending / descending            |
| `m` / `M`      | Sort by memory ascending / descending               |
| `T`            | Kill the selected process                           |
| `e`            | Expand / collapse the focused panel                 |
| `Tab`          | Switch focus between CPU and process panels         |
| `?`            | Show help                                           |
| `Esc`          | Close popup or quit                                 |

The filter matches process names and PIDs as substrings. With follow
selection on, the highlighted process stays selected as the list re-sorts on
each refresh. Process CPU usage is divided by the number of physical cores.
The default sort order is CPU usage, descending.

## Using the building blocks

The list and queue types can be used on their own:

```python
from procdisplay.process_items import ProcessListItem, ListSortOrder
from procdisplay.process_list import ProcessList, MoveSelection

items = [
    ProcessListItem(1, "init", 0.5, 1024, 0, 100, 10, "Sleeping"),
    ProcessListItem(42, "shell", 3.0, 4096, 5, 95, 20, "Running"),
]
plist = ProcessList(items)
plist.sort(ListSortOrder.PID_INC)
plist.move_selection(MoveSelection.DOWN)
print(plist.selected_pid())   # 42
```

`procdisplay.bounded_queue.BoundedQueue` keeps the most recent `capacity`
items, dropping the oldest as new ones arrive. `procdisplay.app.App` accepts
any `system` object with `refresh_all`, `get_cpus`, `get_processes` and
`terminate_process`, and draws onto any screen object with a `size` and a
`put(x, y, text, style)` method.

## What it does not do

- There is no memory panel: `MemoryItem` exists as a data type, but nothing
  reads or shows memory totals.
- There is no theme switching key; `ThemeConfig.toggle_themes` exists but no
  key is bound to it.
- The help popup lists "Move tab left/right", but the `Left`/`Right` keys do
  nothing.
- There is no per-process detail view.
- Settings are not read from a file; only the two command-line options
  change them.

## Tests

```
pip install procdisplay[test]
pytest
```