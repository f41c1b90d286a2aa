"""Interactive line-by-line printing to a receipt printer."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, TextIO

from tmprint.console import clear, get_button
from tmprint.printer import DEFAULT_PORT, DEFAULT_PRINTER_IP, CutMode, PrinterError, Tmt88v

PROMPT = "Please select a mode:\n\n 1 - line by line, smallest text\n\n"

INSTRUCTIONS = (
    "[line by line print system activated]\n\n"
    "Instructions:\n"
    "Type enter at the end of each line to print it onto the tmt88v\n"
    "With an empty line, press END on the keyboard, then press enter to stop.\n"
    "press any button to start...\n"
)

RULER = (
    "****|****|****|****|****|****|****|****|****|****|****|*\n"
    "========================================================\n\n"
)

END_KEYS = ("\x1b[F", "\x1b[4~")
LINE_MODE = "1"


def select_mode(read_key: Callable[[], str], out: TextIO) -> str:
    """Ask for a mode until a valid one is chosen and return it."""
    out.write(PROMPT)
    out.flush()
    failures = 0
    while True:
        key = read_key()
        clear(out)
        if key == LINE_MODE:
            out.write(INSTRUCTIONS)
            out.flush()
            read_key()
            clear(out)
            return key
        failures += 1
        out.write(
            PROMPT
            + f"*That was not an option, try that again... ( you did this {failures} times)*\n"
        )
        out.flush()


def _print_job(printer: Tmt88v) -> bool:
    try:
        printer.print()
    except PrinterError as exc:
        sys.stderr.write(f"print failed: {exc}\n")
        return False
    return True


def run_line_mode(printer: Tmt88v, lines: Iterable[str], out: TextIO) -> int:
    """Print each line as it arrives until the End key or end of input.

    Finishes with a padded full cut and returns the number of lines printed.
    """
    printer.cut_mode = CutMode.NONE
    printer.cut_padding = False
    printer.text = ""
    printed = 0
    source = iter(lines)
    while True:
        out.write(RULER)
        out.flush()
        line = next(source, None)
        if line is None:
            break
        line = line.removesuffix("\n")
        printer.text = line + "\n"
        if line in END_KEYS:
            break
        if _print_job(printer):
            printed += 1
        clear(out)

    printer.text = "\n"
    printer.cut_mode = CutMode.FULL
    printer.cut_padding = True
    _print_job(printer)
    clear(out)
    out.write("PROGRAM_ENDED\n")
    out.flush()
    return printed


def main(argv: list[str] | None = None) -> int:
    """Run the interactive printing session."""
    parser = argparse.ArgumentParser(prog="tmprint", description="Print typed lines on a receipt printer.")
    parser.add_argument("--ip", default=DEFAULT_PRINTER_IP, help="printer address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="printer raw TCP port")
    parser.add_argument("--debug", action="store_true", help="show what is sent")
    args = parser.parse_args(argv)

    out = sys.stdout
    clear(out)
    try:
        select_mode(get_button, out)
    except EOFError:
        return 1

    printer = Tmt88v(printer_ip=args.ip, port=args.port, debug_messages=args.debug)
    run_line_mode(printer, sys.stdin, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())