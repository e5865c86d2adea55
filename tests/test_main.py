import shutil
import subprocess
import sys

import pytest

from dashboard_data.generator.main import generate_dataset, main, run


def test_run_generates_and_exports(tmp_path, monkeypatch):
    monkeypatch.delenv("DASHBOARD_SEED", raising=False)
    output_dir = tmp_path / "out"

    dataset = run(["--seed", "3", "--output-dir", str(output_dir), "--today", "2025-12-02"])

    assert dataset.spend_history[-1].date.isoformat() == "2025-12-01"
    assert (output_dir / "dataset.json").exists()
    assert (output_dir / "vendors.parquet").exists()


def test_run_check_only_writes_nothing(tmp_path, capsys):
    output_dir = tmp_path / "out"

    run(["--check-only", "--output-dir", str(output_dir)])

    assert not output_dir.exists()
    assert "no files written" in capsys.readouterr().out


def test_seed_from_environment(monkeypatch):
    monkeypatch.setenv("DASHBOARD_SEED", "11")
    dataset = run(["--check-only", "--today", "2026-01-15"])
    expected = generate_dataset(seed=11, today=dataset.spend_history[-1].date)
    assert dataset.to_dict() == expected.to_dict()


def test_main_returns_nothing():
    assert main(["--seed", "1", "--check-only"]) is None


def test_main_exit_status_is_success():
    # Console-script wrappers call sys.exit(main())
    with pytest.raises(SystemExit) as excinfo:
        sys.exit(main(["--seed", "1", "--check-only"]))
    assert excinfo.value.code is None


def test_entry_point_exits_zero():
    code = "import sys; from dashboard_data.generator.main import main; sys.exit(main(['--seed', '1', '--check-only']))"
    result = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
    assert "Dataset(" not in result.stderr


@pytest.mark.skipif(shutil.which("dashboard-data") is None, reason="console script not installed")
def test_installed_script_exits_zero():
    result = subprocess.run(["dashboard-data", "--seed", "1", "--check-only"],
                            capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
