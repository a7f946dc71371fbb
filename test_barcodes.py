import pytest

from linebars import Msi, UnknownSymbology, get_encoding, join_slices, runs
from linebars.cli import format_modules, main as barcode_main


def test_join_slices():
    assert join_slices((1, 1, 0), [1, 0], (), (0, 1)) == [1, 1, 0, 1, 0, 0, 1]
    assert join_slices() == []


def test_runs():
    assert list(runs([1, 1, 0, 1, 0, 0, 1])) == [
        (1, 2), (0, 1), (1, 1), (0, 2), (1, 1)
    ]
    assert list(runs([])) == []
    assert list(runs([0])) == [(0, 1)]


def test_runs_cover_barcode():
    modules = Msi("0").encode()
    widths = list(runs(modules))
    assert sum(width for _, width in widths) == len(modules)
    assert widths[:2] == [(1, 2), (0, 1)]
    assert widths[-3:] == [(1, 1), (0, 2), (1, 1)]


def test_get_encoding():
    assert get_encoding("msi") is Msi
    with pytest.raises(UnknownSymbology) as excinfo:
        get_encoding("code39")
    assert excinfo.value.name == "code39"
    assert "msi" in str(excinfo.value)


def test_format_modules():
    assert format_modules([1, 0, 0, 1], "bits") == "1001"
    assert format_modules([1, 0, 0, 1], "runs") == "1 1\n0 2\n1 1"
    assert format_modules([1, 0], "list") == "[1, 0]"
    with pytest.raises(ValueError):
        format_modules([1], "png")


def test_cmd_bits(capsys):
    assert barcode_main(["01"]) == 0
    out, err = capsys.readouterr()
    assert out == "110" "100100100100" "100100100110" "110100100100" "1001\n"
    assert err == ""


def test_cmd_check_digit(capsys):
    assert barcode_main(["--check-digit", "--format=list", "01"]) == 0
    out, err = capsys.readouterr()
    assert out.strip() == repr(Msi("01").encode())
    assert "check digit: 8" in err


def test_cmd_runs(capsys):
    assert barcode_main(["--barcode-type=msi", "--format=runs", "0"]) == 0
    out, _ = capsys.readouterr()
    lines = out.splitlines()
    assert lines[0] == "1 2"
    assert lines[1] == "0 1"
    assert len(lines) == len(list(runs(Msi("0").encode())))


def test_cmd_invalid_content(capsys):
    for content in ("1a", "1" * 50):
        assert barcode_main([content]) == 2
        out, err = capsys.readouterr()
        assert out == ""
        assert err.startswith("error: ")


def test_cmd_unknown_barcode_type():
    with pytest.raises(SystemExit):
        barcode_main(["--barcode-type=qr", "01"])
