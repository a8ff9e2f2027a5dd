# tests/test_cli.py

import pytest

from julianperiod.cli import main


def test_g2jd_command(capsys):
    assert main(["g2jd", "2000", "1", "1"]) == 0
    out = capsys.readouterr().out
    assert "JD = 2451545.000000" in out
    assert "Gregorian" in out

def test_g2jd_command_with_time(capsys):
    assert main(["g2jd", "1957", "10", "4", "--hour", "19", "--minute", "26", "--second", "24"]) == 0
    assert "JD = 2436116.310000" in capsys.readouterr().out

def test_g2jd_command_bce(capsys):
    assert main(["g2jd", "-4712", "1", "1"]) == 0
    out = capsys.readouterr().out
    assert "JD = 0.000000" in out
    assert "Julian" in out

def test_g2jd_command_rejects_bad_month(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["g2jd", "2020", "13", "1"])
    assert exc.value.code == 2
    assert "month must be an integer in 1..12" in capsys.readouterr().err

def test_jd2g_command(capsys):
    assert main(["jd2g", "2451545"]) == 0
    out = capsys.readouterr().out
    assert "year   = 2000" in out
    assert "hour   = 12" in out

def test_jd2g_command_rejects_nan():
    with pytest.raises(SystemExit) as exc:
        main(["jd2g", "nan"])
    assert exc.value.code == 2

def test_cycles_command(capsys):
    assert main(["cycles", "2000"]) == 0
    out = capsys.readouterr().out
    assert "= 21" in out
    assert "= 6713" in out

def test_diag_round_trip_command(capsys):
    pytest.importorskip("numpy")
    assert main(["diag", "round-trip", "--n", "500", "--seed", "3"]) == 0
    assert "failures=0" in capsys.readouterr().out
