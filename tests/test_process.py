from __future__ import annotations

import sys
from pathlib import Path

import pytest
from docscanon.core.process import run_command
from docscanon.exit_codes import ERR_TIMEOUT
from helpers import make_context


def test_run_command_captures_output_and_code(tmp_path: Path) -> None:
    result = run_command([sys.executable, "-c", "import sys; print('out'); print('err', file=sys.stderr); sys.exit(3)"], tmp_path)
    assert result.code == 3
    assert result.stdout.strip() == "out"
    assert result.combined_output == "out\nerr"
    assert not result.timed_out


@pytest.mark.slow
def test_timeout_maps_to_124(tmp_path: Path) -> None:
    result = run_command([sys.executable, "-c", "import time; time.sleep(10)"], tmp_path, timeout_seconds=1)
    assert result.code == ERR_TIMEOUT
    assert result.timed_out
    assert "timed out after 1s" in result.stderr


def test_commands_are_logged_in_verbose_mode(repo: Path, capsys: pytest.CaptureFixture[str]) -> None:
    ctx = make_context(repo, verbose=True, log_json=True)
    run_command([sys.executable, "-c", "pass"], repo, ctx=ctx)
    err = capsys.readouterr().err
    assert '"action": "run-command"' in err
    assert '"run_id": "pytest-run"' in err


def test_exit_code_124_is_not_a_timeout(tmp_path: Path) -> None:
    result = run_command([sys.executable, "-c", "import sys; sys.exit(124)"], tmp_path)
    assert result.code == ERR_TIMEOUT
    assert not result.timed_out
