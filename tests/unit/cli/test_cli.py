# =============================================================================
# tests/unit/cli/test_cli.py
# Unit tests for mkv_chain.cli
# =============================================================================

from __future__ import annotations

import pytest

import mkv_chain.cli as cli
from mkv_chain.core.markov_chain import MarkovChain
from mkv_chain.linalg import SquareMatrix, Vector
from mkv_chain.storage import load, save
from mkv_chain.utils.constants import REFERENCE_RESULT


@pytest.fixture
def absorbing_chain_path(tmp_path):
    chain = MarkovChain(SquareMatrix([[1.0, 0.0], [0.1, 0.9]]), Vector([0.0, 1.0]))
    return save(chain, tmp_path / "absorbing.json")


@pytest.fixture
def reference_chain_path(tmp_path):
    return save(cli.reference_chain(), tmp_path / "reference.json")


class TestDemo:
    def test_prints_every_state(self, capsys) -> None:
        assert cli.main(["demo", "--steps", "2"]) == cli.EXIT_OK
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "step 0: [0.1, 0.3, 0.6]"
        assert len(lines) == 3

    def test_default_steps_reach_golden_value(self, capsys) -> None:
        assert cli.main(["demo"]) == cli.EXIT_OK
        last = capsys.readouterr().out.splitlines()[-1]
        assert last == "step 3: [0.12250000000000001, 0.11130000000000001, 0.7662]"

    def test_negative_steps_is_chain_error(self, capsys) -> None:
        assert cli.main(["demo", "--steps", "-1"]) == cli.EXIT_CHAIN_ERROR
        assert "CHAIN_ERROR" in capsys.readouterr().err


class TestRun:
    def test_prints_result(self, reference_chain_path, capsys) -> None:
        rc = cli.main(["run", str(reference_chain_path), "--steps", "3"])
        assert rc == cli.EXIT_OK
        assert capsys.readouterr().out.strip() == (
            "[0.12250000000000001, 0.11130000000000001, 0.7662]"
        )

    def test_writes_output(self, reference_chain_path, tmp_path) -> None:
        out = tmp_path / "state.json"
        rc = cli.main(["run", str(reference_chain_path), "--steps", "3", "--output", str(out)])
        assert rc == cli.EXIT_OK
        assert load(out) == Vector(REFERENCE_RESULT)

    def test_missing_file(self, tmp_path, capsys) -> None:
        rc = cli.main(["run", str(tmp_path / "absent.json"), "--steps", "1"])
        assert rc == cli.EXIT_INPUT_ERROR
        assert "INPUT_ERROR" in capsys.readouterr().err

    def test_wrong_kind(self, tmp_path) -> None:
        path = save(Vector([1.0, 0.0]), tmp_path / "vec.json")
        assert cli.main(["run", str(path), "--steps", "1"]) == cli.EXIT_INPUT_ERROR

    def test_steps_required(self, reference_chain_path) -> None:
        with pytest.raises(SystemExit):
            cli.main(["run", str(reference_chain_path)])


class TestAbsorbing:
    def test_reports_columns(self, absorbing_chain_path, capsys) -> None:
        assert cli.main(["absorbing", str(absorbing_chain_path)]) == cli.EXIT_OK
        assert capsys.readouterr().out.strip() == "absorbing columns: 0"

    def test_reports_none(self, reference_chain_path, capsys) -> None:
        assert cli.main(["absorbing", str(reference_chain_path)]) == cli.EXIT_OK
        assert capsys.readouterr().out.strip() == "no absorbing state"


class TestVerify:
    def test_passes(self, capsys) -> None:
        assert cli.main(["verify"]) == cli.EXIT_OK
        assert capsys.readouterr().out.startswith("PASS")

    def test_mismatch_exit_code(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr(
            cli, "reference_chain",
            lambda: MarkovChain(SquareMatrix.identity(3), Vector([0.1, 0.3, 0.6])),
        )
        assert cli.main(["verify"]) == cli.EXIT_MISMATCH
        err = capsys.readouterr().err
        assert err.startswith("FAIL")
        assert "vector[0]" in err


class TestParser:
    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            cli.main([])

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as info:
            cli.main(["--version"])
        assert info.value.code == 0
        assert "mkv_chain" in capsys.readouterr().out
