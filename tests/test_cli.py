import pytest

from patternshowcase.cli import SEPARATOR, main


def test_main_returns_zero(capsys):
    assert main([]) == 0
    capsys.readouterr()


def test_output_starts_with_first_heading(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == SEPARATOR
    assert lines[1] == "# Decorator"


def test_headings_in_order(capsys):
    main([])
    out = capsys.readouterr().out
    titles = [
        "# Decorator",
        "# Singleton",
        "# Observer",
        "# Strategy",
        "# Builder",
        "# Factory Method",
        "# Abstract Factory",
        "# Facade",
    ]
    positions = [out.index(title) for title in titles]
    assert positions == sorted(positions)
    assert out.count(SEPARATOR) == len(titles)


def test_unknown_option_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2
    capsys.readouterr()