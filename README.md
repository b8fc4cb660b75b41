# cursus

A small collection of command-line tools and helpers:

- a `printf`-style formatter with `%c %s %p %d %i %u %x %X %%` and the
  `- 0 . # space +` flags (`cursus.printf`);
- a buffered line reader that returns one line at a time from a file
  descriptor (`cursus.linereader`);
- two stacks with the push_swap operations, a sorter that produces the
  operations, and a checker that verifies them (`cursus.stacks`,
  `cursus.sorter`, `cursus.push_swap`, `cursus.checker`);
- `fdf`, an interactive wireframe viewer for height maps, drawn with
  pygame (`cursus.fdf_map`, `cursus.fdf_render`, `cursus.fdf_app`);
- `pipex`, which runs commands one after another, each fed the output of
  the one before, between an input and an output file (`cursus.pipex`).

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Formatting

```python
from cursus.printf import render, printf, format_hex, format_address

render("%5d|%-4s|%#x", 42, "ab", 255)   # build the text
printf("%s has %u items\n", "cart", 3)  # write it to standard output
format_hex(255, upper=True)             # "FF"
format_address(0)                       # "(nil)"
```

`printf` returns the number of characters written. Integers are taken as
32-bit values; `%s` accepts a string or `None` (shown as `(null)`). A
malformed specification, an unknown conversion or a missing argument
raises `ValueError`. `parse_flags(fmt, pos)` parses one specification and
returns a `Flags` object, the conversion character and the next index.

## Reading lines

```python
from cursus.linereader import LineReader, get_next_line

reader = LineReader(buffer_size=4096)
line = reader.read_line(fd)   # bytes, or None once the descriptor is exhausted

line = get_next_line(fd)      # shared reader, one pending buffer per descriptor
```

Each line keeps its trailing newline; the last line of a file may not
have one. Data read past a newline is kept per descriptor, so several
descriptors can be read in turns. `None` is also returned for a
descriptor outside 0..4095 or when the read fails.

## push_swap and checker

Stack `a` holds the values (top first) and stack `b` starts empty. They
are manipulated with eleven operations, `sa sb ss pa pb ra rb rr rra rrb
rrr`, available as the `Operation` enum.

```python
from cursus.stacks import Stacks
from cursus.sorter import sort_values

operations = sort_values([3, 1, 2])
stacks = Stacks([3, 1, 2])
stacks.run(operations)
list(stacks.a)        # [1, 2, 3]
stacks.history        # the operations that took effect
```

`Stacks.apply` performs one operation and returns whether it took effect.
`sort_values` returns no operations for input already in order and
raises `ValueError` on duplicates.

From the shell:

```
push_swap 3 1 2 5 4
push_swap 3 1 2 5 4 | checker 3 1 2 5 4
```

`push_swap` prints one operation per line. Arguments must be distinct
integers within the 32-bit signed range; otherwise `Error` is written to
standard error. With no arguments both commands do nothing. `checker`
reads operations from standard input, one per line, and prints `OK` when
stack `a` ends up in ascending order and stack `b` empty, `KO` otherwise,
and `Error` on a bad argument or an unknown operation. The same checks
are available as `validate_arguments`, `is_sorted` (in
`cursus.push_swap`) and `run_checker(values, lines)` (in
`cursus.checker`).

## fdf

```
fdf map.fdf
```

A map is a text file of rows of integer heights separated by spaces; a
height may carry a colour as `height,0xRRGGBB`. Every row must have the
same number of values as the first, otherwise the map is refused.

Controls:

- arrow keys move the map, or rotate it in rotation mode;
- left Control toggles rotation mode;
- left Shift toggles colouring by height;
- Tab toggles scale mode, where scrolling stretches heights instead of
  zooming towards the pointer;
- dragging with the left mouse button moves the map, or rotates it in
  rotation mode;
- Escape or closing the window quits.

The map can also be loaded and drawn without a window:

```python
from cursus.fdf_map import ViewSettings, parse_map
from cursus.fdf_render import Canvas, rotate_map, draw_map

settings = ViewSettings()
heightmap = parse_map("map.fdf", settings)   # MapError if unreadable or malformed
canvas = Canvas(1920, 1080)
rotate_map(heightmap, settings)
draw_map(canvas, settings, heightmap)
canvas.get_pixel(960, 540)                   # 0xAARRGGBB
```

The event handlers (`handle_key_offset`, `handle_key_rotation`,
`handle_scroll`, `handle_mouse_move`) in `cursus.fdf_app` work on a
`ViewSettings` and can be used on their own. No sample maps are included.

## pipex

```
pipex infile "grep foo" "wc -l" outfile
```

gives the same result in `outfile` as `< infile grep foo | wc -l > outfile`.
Commands are looked up in `PATH` unless they start with `/` or `.`. An
input of `/dev/urandom` takes its first 1024 bytes. The output file is
created with mode 0644 and truncated.

`pipex-bonus` accepts any number of commands, and a here-document as
input, appending to the output file:

```
pipex-bonus infile "cat" "sort" "uniq" outfile
pipex-bonus here_doc END "cat" "wc -l" outfile
```

The here-document is read from standard input, with a `here_doc> `
prompt, until a line that is exactly the delimiter.

From Python:

```python
import os
from cursus.pipex import build_pipeline

pipeline = build_pipeline(["infile", "grep foo", "wc -l", "outfile"], os.environ)
statuses = pipeline.run()   # exit status of each command
```

Setup failures (missing arguments, unreadable input, no `PATH`) raise
`PipexError`. A command that cannot be found is reported on standard
error, gets status 127 and passes empty output to the next command.

### Limitations

- Commands run one at a time, each to completion, with its whole output
  held in memory before the next starts; they do not run concurrently.
- Command strings are split on spaces only: there is no quoting,
  globbing, variable expansion or redirection.