import importlib.util
from pathlib import Path

import pytest

from .conftest import STOP_BYTECODE, write_artifact

SCRIPT = Path(__file__).parent.parent / "scripts" / "validate_package.py"


@pytest.fixture(scope="module")
def validate_package():
    spec = importlib.util.spec_from_file_location("validate_package", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_all_artifacts_valid(validate_package, artifacts_dir, capsys):
    assert validate_package.validate(artifacts_dir) == 0

    out = capsys.readouterr().out
    assert "✅ Token: 2 ABI items, 4 bytecode chars" in out
    assert "✅ SplitsWarehouseMock: 1 ABI items, 4 bytecode chars" in out
    assert "✅ All contracts valid!" in out


def test_missing_directory(validate_package, tmp_path, capsys):
    assert validate_package.validate(tmp_path / "missing") == 1

    out = capsys.readouterr().out
    assert "❌ Token: missing artifact, ABI or bytecode" in out
    assert "❌ SplitsWarehouseMock: missing artifact, ABI or bytecode" in out
    assert "❌ Some contracts failed validation" in out


def test_one_contract_without_bytecode(validate_package, tmp_path, capsys):
    write_artifact(tmp_path, "Token", STOP_BYTECODE)
    write_artifact(tmp_path, "SplitsWarehouseMock", "0x")

    assert validate_package.validate(tmp_path) == 1

    out = capsys.readouterr().out
    assert "✅ Token" in out
    assert "❌ SplitsWarehouseMock" in out
