# tmprint

Type text at the terminal and have it printed, one line at a time, on an
Epson TM-T88V receipt printer that is reached over the network (raw TCP,
port 9100 by default).

## Installing

    pip install .

## Using the command

    tmprint [--ip ADDRESS] [--port PORT] [--debug]

- `--ip` is the printer's address (default `192.168.86.200`).
- `--port` is the printer's raw TCP port (default `9100`).
- `--debug` prints what is sent to the printer on standard output.

The program clears the screen and asks you to choose a mode. Press `1` to
start line-by-line printing, which uses the smallest font. Any other key shows
the prompt again, together with a count of how many wrong choices you have
made. After choosing, the instructions are shown; press any key to go on. If
input ends before a mode is chosen, the command exits with status 1.

In line-by-line mode, each line you type is sent to the printer when you
press Enter, with no cut between lines. The ruler printed above the input
shows the 56-character width of a line in the smallest font. To finish,
press the End key on an empty line and then Enter (the end of input finishes
too). The printer then feeds four blank lines and makes a full cut, and the
program prints `PROGRAM_ENDED`. If a line cannot be printed, the error is
written to standard error and the session carries on.

## Using the library

```python
from tmprint.printer import Tmt88v, CutMode, PrinterError, wrap_text

printer = Tmt88v(printer_ip="192.168.86.200")
printer.text = "Hello, receipt!\n"
printer.cut_mode = CutMode.PARTIAL
printer.word_text_wrapping = True

print(printer.prepared_text())     # the text after wrapping and padding
payload = printer.build_payload()  # font commands, text and cut command as bytes

try:
    sent = printer.print()         # number of text bytes sent
except PrinterError as exc:
    print("printing failed:", exc)
```

`Tmt88v` is a dataclass with these fields and defaults:

| field                | default            | meaning                                        |
|----------------------|--------------------|------------------------------------------------|
| `printer_ip`         | `"192.168.86.200"` | printer address                                |
| `port`               | `9100`             | raw TCP port                                   |
| `text`               | `"Hello, Epson TM-T88V!\n"` | text to print                         |
| `debug_messages`     | `False`            | write progress messages to standard output     |
| `cut_mode`           | `CutMode.FULL`     | `CutMode.NONE`, `CutMode.PARTIAL` or `CutMode.FULL` |
| `cut_padding`        | `True`             | add four blank lines after the text            |
| `word_text_wrapping` | `False`            | wrap the text to `page_width`                  |
| `page_width`         | `56`               | line width used for wrapping                   |
| `font_style_index`   | `0`                | `0` = Font B (smaller), `1` = Font A           |
| `font_scale_index`   | `0`                | `0`–`3` for 1x to 4x magnification             |
| `encoding`           | `"utf-8"`          | text encoding for the file and the printer     |
| `timeout`            | `None`             | connection timeout in seconds                  |

- `wrap_text(contents, max_width)` breaks text at word boundaries so that no
  line is longer than `max_width`; longer words are split. Whitespace inside a
  line is collapsed, blank lines are dropped, and every line ends in a
  newline. A width below 1 raises `ValueError`.
- `Tmt88v.load_text_from_file(filename)` replaces the text with the whole
  content of the file.
- `Tmt88v.prepared_text()` returns the text as it is sent: wrapped if
  wrapping is on, padded if cut padding is on.
- `Tmt88v.build_payload()` returns all bytes of one job: font style and size
  commands, the encoded text and the cut command.
- `Tmt88v.print()` connects, sends the job and returns the number of text
  bytes sent. Connection or send failures raise `PrinterError` (a subclass of
  `OSError`). A font index out of range raises `IndexError`.

The terminal helpers in `tmprint.console` are:

- `clear(out=None)` resets the terminal and homes the cursor.
- `get_button(stream=None)` waits for one key press (on a terminal, without
  line buffering or echo) and returns its name.
- `decode_key(read_char)` turns raw key input into names such as `"Enter"`,
  `"Escape"`, `"ArrowUp"`, `"Home"` or `"PageDown"`; other keys come back as
  the character itself. It raises `EOFError` when there is no input.

## What it does not do

The command has a single mode, line-by-line printing in the smallest font.
There is no mode for printing a file, choosing fonts or wrapping from the
command line; use the `Tmt88v` class for those. Nothing is read back from
the printer, so paper or status problems are not reported.

## Running the tests

    pip install .[test]
    pytest