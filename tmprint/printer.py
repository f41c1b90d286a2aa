"""Network printing to an ESC/POS receipt printer on a raw TCP port."""

from __future__ import annotations

import socket
import sys
from dataclasses import dataclass
from enum import IntEnum

DEFAULT_PRINTER_IP = "192.168.86.200"
DEFAULT_PORT = 9100
DEFAULT_TEXT = "Hello, Epson TM-T88V!\n"
CUT_PADDING = "\n\n\n\n"

FONT_STYLE_CMDS = (
    bytes([0x1B, 0x4D, 0x01]),  # Font B (smaller base font)
    bytes([0x1B, 0x4D, 0x00]),  # Font A (normal base font)
)

FONT_SIZE_CMDS = (
    bytes([0x1D, 0x21, 0x00]),  # 1x width and height
    bytes([0x1D, 0x21, 0x11]),  # 2x
    bytes([0x1D, 0x21, 0x22]),  # 3x
    bytes([0x1D, 0x21, 0x33]),  # 4x
)

PARTIAL_CUT = bytes([0x1D, 0x56, 0x01])
FULL_CUT = bytes([0x1D, 0x56, 0x00])


class CutMode(IntEnum):
    """What the printer does with the paper after printing."""

    NONE = 0
    PARTIAL = 1
    FULL = 2


class PrinterError(OSError):
    """The printer could not be reached or the data could not be sent."""


def wrap_text(contents: str, max_width: int) -> str:
    """Word-wrap ``contents`` so no line is longer than ``max_width``.

    Words longer than the width are split. Whitespace inside a line is
    collapsed and blank lines are dropped; every output line ends in a newline.
    """
    if max_width < 1:
        raise ValueError(f"max_width must be positive, got {max_width}")

    lines = contents.split("\n")
    if contents.endswith("\n"):
        lines.pop()

    output: list[str] = []
    for line in lines:
        current = ""
        for word in line.split():
            while len(word) > max_width:
                if current:
                    output.append(current)
                    current = ""
                output.append(word[:max_width])
                word = word[max_width:]
            if not current:
                current = word
            elif len(current) + 1 + len(word) <= max_width:
                current += " " + word
            else:
                output.append(current)
                current = word
        if current:
            output.append(current)
    return "".join(f"{line}\n" for line in output)


@dataclass
class Tmt88v:
    """Settings and text for one print job, and the means to send it."""

    printer_ip: str = DEFAULT_PRINTER_IP
    port: int = DEFAULT_PORT
    text: str = DEFAULT_TEXT
    debug_messages: bool = False
    cut_mode: int = CutMode.FULL
    cut_padding: bool = True
    word_text_wrapping: bool = False
    page_width: int = 56
    font_style_index: int = 0
    font_scale_index: int = 0
    encoding: str = "utf-8"
    timeout: float | None = None

    font_style_cmds = FONT_STYLE_CMDS
    font_size_cmds = FONT_SIZE_CMDS

    def load_text_from_file(self, filename) -> None:
        """Replace the text with the whole content of ``filename``."""
        with open(filename, encoding=self.encoding, newline="") as handle:
            self.text = handle.read()

    def _wrapped_text(self) -> str:
        if self.word_text_wrapping:
            return wrap_text(self.text, self.page_width)
        return self.text

    def prepared_text(self) -> str:
        """The text as it goes to the printer, wrapped and padded."""
        contents = self._wrapped_text()
        if self.cut_padding:
            contents += CUT_PADDING
        return contents

    def _font_commands(self) -> bytes:
        if not 0 <= self.font_style_index < len(self.font_style_cmds):
            raise IndexError(f"font style index {self.font_style_index} out of range")
        if not 0 <= self.font_scale_index < len(self.font_size_cmds):
            raise IndexError(f"font scale index {self.font_scale_index} out of range")
        return self.font_style_cmds[self.font_style_index] + self.font_size_cmds[self.font_scale_index]

    def _cut_command(self) -> bytes:
        mode = int(self.cut_mode)
        if mode == CutMode.PARTIAL:
            return PARTIAL_CUT
        if mode == CutMode.FULL:
            return FULL_CUT
        return b""

    def build_payload(self) -> bytes:
        """All bytes one print job sends: font commands, text, cut command."""
        return (
            self._font_commands()
            + self.prepared_text().encode(self.encoding)
            + self._cut_command()
        )

    def _debug(self, message: str) -> None:
        if self.debug_messages:
            sys.stdout.write(message)

    def print(self) -> int:
        """Send the job to the printer and return the number of text bytes sent."""
        header = self._font_commands()
        contents = self._wrapped_text()
        self._debug(f"==== Here is what we are printing ====\n{contents}\n==== End of sample ====\n")
        if self.cut_padding:
            contents += CUT_PADDING
            self._debug("4 lines of padding appended.\n")
        data = contents.encode(self.encoding)
        cut = self._cut_command()

        try:
            with socket.create_connection((self.printer_ip, self.port), timeout=self.timeout) as sock:
                sock.sendall(header)
                self._debug(f"Connected to printer at {self.printer_ip}\n")
                sock.sendall(data)
                self._debug(f"Sent {len(data)} bytes of data\n")
                if cut:
                    sock.sendall(cut)
                if cut == PARTIAL_CUT:
                    self._debug("✂️ Sent PARTIAL cut command\n")
                elif cut == FULL_CUT:
                    self._debug("🔪 Sent FULL cut command\n")
                else:
                    self._debug("🚫 No cut command sent\n")
        except OSError as exc:
            raise PrinterError(f"cannot print to {self.printer_ip}:{self.port}: {exc}") from exc
        return len(data)