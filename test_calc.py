import io

import pytest

from calc import main


def test_solves_arguments(capsys):
    assert main(["1+2", "1+2*3^4", "3-2+22/(33-33)"]) == 0
    out, err = capsys.readouterr()
    assert out.splitlines() == ["3", "163", "inf"]
    assert err == ""


def test_rpn_flag(capsys):
    assert main(["--rpn", "3 + 4 * 2 / ( 1 - 5 ) ^ 2 ^ 3"]) == 0
    assert capsys.readouterr().out == "3 4 2 * 1 5 - 2 3 ^ ^ / +\n"


def test_errors_set_exit_status(capsys):
    assert main(["(1+2", "1+1", "1+a"]) == 1
    out, err = capsys.readouterr()
    assert out == "2\n"
    assert err.splitlines() == [
        "error: Unmatched opening parenthesis",
        "error: Unknown operator: a",
    ]


@pytest.mark.parametrize("rpn_flag", [[], ["--rpn"]])
def test_repl(monkeypatch, capsys, rpn_flag):
    monkeypatch.setattr("sys.stdin", io.StringIO("1+2\n\n  \n1.2.3\n2^3^2\n"))
    assert main(rpn_flag) == 0
    out, err = capsys.readouterr()
    results = [line.split("calc> ")[-1] for line in out.splitlines()]
    if rpn_flag:
        assert [r for r in results if r] == ["1 2 +", "2 3 2 ^ ^"]
    else:
        assert [r for r in results if r] == ["3", "512"]
    assert "error: Cannot parse number: '1.2.3'" in err
