import pytest

from boldline import __version__
from boldline.cli import main


def test_default_is_ansi_cross(capsys):
    assert main(["ab"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "\x1b[1ma\x1b[0m\x1b[1mb\x1b[0m\n"


def test_html_joins_with_break_tags(capsys):
    main(["boldline", "-m", "html", "-p", "left"])
    out = capsys.readouterr().out
    lines = out.rstrip("\n").split("<br/>\n")
    assert len(lines) == 8
    assert lines[0] == "<b>b</b>oldline"
    assert lines[-1] == "boldlin<b>e</b>"


def test_markdown_uses_hard_breaks(capsys):
    main(["ab", "--markup", "MD", "--pattern", "r"])
    assert capsys.readouterr().out == "a**b**  \n**a**b\n"


def test_custom_markup(capsys):
    main(["abcd", "--prefix", "(", "--suffix", ")"])
    assert capsys.readouterr().out == "(a)bc(d)\na(b)(c)d\n(a)bc(d)\n"


def test_custom_markup_dedupe(capsys):
    main(["abcd", "--prefix", "(", "--suffix", ")", "--dedupe"])
    assert capsys.readouterr().out == "(a)bc(d)\na(bc)d\n(a)bc(d)\n"


def test_empty_text_prints_blank_line(capsys):
    assert main([""]) == 0
    assert capsys.readouterr().out == "\n"


@pytest.mark.parametrize(
    "argv, message",
    [
        (["ab", "-m", "latex"], "Unknown markup 'latex'"),
        (["ab", "-p", "zigzag"], "Unknown pattern 'zigzag'"),
        (["ab", "--prefix", "("], "--prefix and --suffix must be given together"),
        (["ab", "-m", "html", "--prefix", "(", "--suffix", ")"], "--markup cannot be combined"),
        (["ab", "--dedupe"], "--dedupe only applies to a custom markup"),
        ([], "the following arguments are required: text"),
    ],
)
def test_invalid_input_exits_before_generating(argv, message, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert message in captured.err
    assert captured.out == ""


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_verbose_logs_to_stderr(capsys):
    main(["a b", "-m", "html", "-p", "left", "-v"])
    captured = capsys.readouterr()
    assert captured.out == "<b>a</b> b<br/>\na <b>b</b>\n"
    assert "Generated 2 lines for 3 characters" in captured.err


def test_text_starting_with_dash(capsys):
    main(["-m", "html", "-p", "left", "--", "-a"])
    assert capsys.readouterr().out == "<b>-</b>a<br/>\n-<b>a</b>\n"
