"""Tests for the utf8chunks command line."""

from click.testing import CliRunner

from utf8chunks.cli import main


def run(args, data):
    runner = CliRunner()
    return runner.invoke(main, args, input=data)


def test_wraps_stdin():
    result = run(["--width", "5"], "123456789\nabc\n".encode())
    assert result.exit_code == 0
    assert result.output == "12345\n6789\nabc\n"


def test_wraps_cjk():
    result = run(["-w", "10"], "やきにくがたべたい…しかし😫\n".encode())
    assert result.exit_code == 0
    assert result.output == "やきにくが\nたべたい…\nしかし😫\n"


def test_empty_input():
    result = run([], b"")
    assert result.exit_code == 0
    assert result.output == ""


def test_keeps_blank_lines():
    result = run(["-w", "3"], b"ab\n\ncd\n")
    assert result.output == "ab\n\ncd\n"


def test_drop_blank():
    result = run(["-w", "3", "--drop-blank"], b"ab\n  \ncd\n")
    assert result.output == "ab\ncd\n"


def test_reads_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes("しかし😫".encode())
    result = run(["-w", "4", str(path)], None)
    assert result.exit_code == 0
    assert result.output == "しか\nし😫\n"


def test_ambiguous_width_option():
    result = run(["-w", "2", "--ambiguous-width", "2"], "……".encode())
    assert result.output == "…\n…\n"


def test_invalid_encoding_fails():
    result = run(["-w", "5"], b"ab\xffcd\n")
    assert result.exit_code == 1
    assert "error:" in result.output
    assert "byte 2" in result.output


def test_overflow_error_fails():
    result = run(["-w", "1", "--overflow", "error"], "あ".encode())
    assert result.exit_code == 1
    assert "U+3042" in result.output


def test_negative_width_rejected():
    result = run(["--width=-1"], b"abc")
    assert result.exit_code == 2


def test_drop_blank_ideographic_spaces():
    data = "ab\n\u3000\u3000\ncd\n".encode()
    result = run(["-w", "3", "--drop-blank"], data)
    assert result.exit_code == 0
    assert result.output == "ab\ncd\n"
