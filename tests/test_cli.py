import os

import pytest

from relrocket import cli
from relrocket import constants as C


def test_parse_args_defaults():
    args = cli.parse_args([])
    assert args.acceleration == C.G
    assert args.steps == C.DEFAULT_STEPS
    assert args.mode == 'coordinate'
    assert args.no_plots is False

def test_parse_args_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        cli.parse_args(['--mode', 'sideways'])

def test_main_prints_summary(capsys):
    cli.main(['--steps', '200', '--duration-years', '1.19', '--no-plots', '-q'])
    out = capsys.readouterr().out
    assert "SIMULATION SUMMARY" in out
    assert "Completed 200 steps" in out

def test_main_proper_mode_with_plots(tmp_path, capsys):
    out_dir = tmp_path / "plots"
    cli.main(['--steps', '100', '--mode', 'proper', '-q', '-o', str(out_dir)])
    assert len(os.listdir(out_dir)) == 3
    assert "Wrote 3 plots" in capsys.readouterr().out

def test_main_failure_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(['--steps', '0', '--no-plots', '-q'])
    assert exc.value.code == 1
    assert "[ERROR]" in capsys.readouterr().out
