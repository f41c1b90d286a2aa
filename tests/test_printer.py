import queue
import socket
import threading

import pytest

from tmprint.printer import CutMode, PrinterError, Tmt88v, wrap_text

HEADER = b"\x1bM\x01\x1d!\x00"


class _Sink:
    def __init__(self):
        self._server = socket.create_server(("127.0.0.1", 0))
        self.port = self._server.getsockname()[1]
        self.received = queue.Queue()
        threading.Thread(target=self._serve, daemon=True).start()

    def _serve(self):
        while True:
            try:
                conn, _ = self._server.accept()
            except OSError:
                return
            with conn:
                chunks = []
                while data := conn.recv(4096):
                    chunks.append(data)
            self.received.put(b"".join(chunks))

    def close(self):
        self._server.close()


@pytest.fixture
def sink():
    server = _Sink()
    yield server
    server.close()


def _closed_port():
    with socket.create_server(("127.0.0.1", 0)) as server:
        return server.getsockname()[1]


def test_wrap_splits_long_word():
    assert wrap_text("abcdefgh", 3) == "abc\ndef\ngh\n"


def test_wrap_packs_words():
    assert wrap_text("one two three", 7) == "one two\nthree\n"


def test_wrap_drops_blank_lines():
    assert wrap_text("a\n\n   b\n", 10) == "a\nb\n"


@pytest.mark.parametrize(
    "text, width",
    [
        ("The quick brown fox jumps over the lazy dog", 10),
        ("supercalifragilisticexpialidocious is long", 8),
        ("tabs\tand   spaces\nsecond line here", 6),
        ("x " * 50, 1),
    ],
)
def test_wrap_invariants(text, width):
    result = wrap_text(text, width)
    lines = result.split("\n")
    assert lines[-1] == ""
    assert all(0 < len(line) <= width for line in lines[:-1])
    assert "".join(result.split()) == "".join(text.split())


def test_wrap_rejects_non_positive_width():
    with pytest.raises(ValueError):
        wrap_text("abc", 0)


def test_defaults():
    printer = Tmt88v()
    assert printer.text == "Hello, Epson TM-T88V!\n"
    assert printer.printer_ip == "192.168.86.200"
    assert printer.port == 9100
    assert printer.page_width == 56
    assert printer.cut_mode == CutMode.FULL
    assert printer.cut_padding is True


def test_payload_full_cut_with_padding():
    printer = Tmt88v(text="hi\n")
    assert printer.build_payload() == HEADER + b"hi\n" + b"\n\n\n\n" + b"\x1dV\x00"


def test_payload_partial_cut():
    printer = Tmt88v(text="hi\n", cut_mode=CutMode.PARTIAL)
    assert printer.build_payload().endswith(b"\n\n\n\n\x1dV\x01")


def test_payload_without_cut_or_padding():
    printer = Tmt88v(text="hi\n", cut_mode=CutMode.NONE, cut_padding=False)
    assert printer.build_payload() == HEADER + b"hi\n"


def test_payload_font_selection():
    printer = Tmt88v(text="", font_style_index=1, font_scale_index=3, cut_padding=False)
    assert printer.build_payload().startswith(b"\x1bM\x00\x1d!\x33")


@pytest.mark.parametrize("style, scale", [(2, 0), (0, 4), (-1, 0)])
def test_payload_rejects_bad_font_index(style, scale):
    printer = Tmt88v(font_style_index=style, font_scale_index=scale)
    with pytest.raises(IndexError):
        printer.build_payload()


def test_prepared_text_wraps_when_enabled():
    text = "hello world and more words"
    printer = Tmt88v(text=text, word_text_wrapping=True, page_width=5, cut_padding=False)
    assert printer.prepared_text() == wrap_text(text, 5)


def test_prepared_text_keeps_text_when_wrapping_off():
    printer = Tmt88v(text="a very long line that is not wrapped", page_width=5)
    assert printer.prepared_text() == "a very long line that is not wrapped\n\n\n\n"


def test_load_text_round_trip(tmp_path):
    path = tmp_path / "receipt.txt"
    content = "line one\r\nline two\n"
    path.write_bytes(content.encode("utf-8"))
    printer = Tmt88v()
    printer.load_text_from_file(path)
    assert printer.text == content


def test_load_text_missing_file(tmp_path):
    printer = Tmt88v()
    with pytest.raises(FileNotFoundError):
        printer.load_text_from_file(tmp_path / "absent.txt")
    assert printer.text == "Hello, Epson TM-T88V!\n"


def test_print_sends_payload(sink):
    printer = Tmt88v(printer_ip="127.0.0.1", port=sink.port, text="receipt\n", timeout=5)
    sent = printer.print()
    assert sink.received.get(timeout=5) == printer.build_payload()
    assert sent == len(printer.prepared_text().encode("utf-8"))


def test_print_debug_messages(sink, capsys):
    printer = Tmt88v(printer_ip="127.0.0.1", port=sink.port, text="x\n", debug_messages=True, timeout=5)
    printer.print()
    sink.received.get(timeout=5)
    output = capsys.readouterr().out
    assert "==== Here is what we are printing ====" in output
    assert "4 lines of padding appended." in output
    assert "Sent FULL cut command" in output


def test_print_unreachable_printer():
    printer = Tmt88v(printer_ip="127.0.0.1", port=_closed_port(), timeout=5)
    with pytest.raises(PrinterError):
        printer.print()