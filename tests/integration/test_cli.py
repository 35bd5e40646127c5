"""Integration tests for the rwa-deployments command line."""

import json
from pathlib import Path
from typing import Dict

import pytest
import responses

from rwa_deployments.cli import main


@pytest.fixture
def configured_env(clean_env: Path, sample_env: Dict[str, str], monkeypatch) -> Path:
    for var, value in sample_env.items():
        monkeypatch.setenv(var, value)
    return clean_env


class TestPlanCommand:
    """Test the plan subcommand."""

    def test_prints_project_plan(self, configured_env: Path, capsys):
        assert main(["plan", "--network", "sepolia"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [op["module_id"] for op in data["operations"]] == [
            "RWATokenFactoryModule",
            "SaleEscrowModule",
            "SaleMarketplaceModule",
        ]
        assert data["operations"][-1]["args"][-1] == "0x220878008d3eb7c94Afda696d2057462df66fdd8"

    def test_live_escrow(self, configured_env: Path, capsys):
        assert main(["plan", "--network", "sepolia", "--live-escrow"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["operations"][-1]["args"][-1] == {"pending": "SaleEscrowModule#escrow"}

    def test_modules_directory(self, configured_env: Path, modules_dir: Path, capsys):
        assert main(["plan", "--network", "mainnet", "--modules", str(modules_dir)]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["metadata"]["chain_id"] == 1
        assert len(data["operations"]) == 3

    def test_output_file(self, configured_env: Path, capsys):
        output = configured_env / "plan.json"

        assert main(["plan", "--network", "sepolia", "--output", str(output)]) == 0

        assert capsys.readouterr().out.strip() == str(output)
        assert json.loads(output.read_text())["metadata"]["network"] == "sepolia"

    def test_env_file(self, clean_env: Path, capsys):
        env_file = clean_env / "deploy.env"
        env_file.write_text("KEY=k\nPRIVATE_KEY=0xbeef\n")

        assert main(["plan", "--network", "sepolia", "--env-file", str(env_file)]) == 0

    def test_missing_configuration(self, clean_env: Path, capsys):
        assert main(["plan", "--network", "sepolia"]) == 1

        err = capsys.readouterr().err
        assert "KEY" in err
        assert "PRIVATE_KEY" in err

    def test_unknown_network(self, configured_env: Path, capsys):
        assert main(["plan", "--network", "ropsten"]) == 1
        assert "ropsten" in capsys.readouterr().err

    def test_cycle_reported(self, configured_env: Path, cyclic_modules_dir: Path, capsys):
        assert main(["plan", "--network", "sepolia", "--modules", str(cyclic_modules_dir)]) == 1

        err = capsys.readouterr().err
        assert "Cyclic" in err
        assert "A" in err and "B" in err

    @responses.activate
    def test_verify_endpoint_mismatch(self, configured_env: Path, capsys):
        responses.add(
            responses.POST,
            "https://mainnet.infura.io/v3/infura-test-key",
            json={"result": "0xaa36a7"},
            status=200,
        )

        assert main(["plan", "--network", "mainnet", "--verify-endpoint"]) == 1
        assert "expected 1" in capsys.readouterr().err

    @responses.activate
    def test_verify_endpoint_match(self, configured_env: Path, capsys):
        responses.add(
            responses.POST,
            "https://sepolia.infura.io/v3/infura-test-key",
            json={"result": "0xaa36a7"},
            status=200,
        )

        assert main(["plan", "--network", "sepolia", "--verify-endpoint"]) == 0


class TestPlanCommandInputErrors:
    """Test that mistyped inputs fail instead of producing an empty plan."""

    def test_missing_modules_directory(self, configured_env: Path, capsys):
        missing = configured_env / "typo"

        assert main(["plan", "--network", "sepolia", "--modules", str(missing)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "typo" in captured.err

    def test_unreadable_descriptor(self, configured_env: Path, capsys):
        modules = configured_env / "modules"
        (modules / "broken.json").mkdir(parents=True)

        assert main(["plan", "--network", "sepolia", "--modules", str(modules)]) == 1
        assert "broken.json" in capsys.readouterr().err

    def test_live_escrow_with_modules_rejected(self, configured_env: Path, modules_dir: Path):
        with pytest.raises(SystemExit) as exc_info:
            main(["plan", "--network", "sepolia", "--modules", str(modules_dir), "--live-escrow"])

        assert exc_info.value.code == 2

    def test_missing_env_file(self, clean_env: Path, capsys):
        assert main(["plan", "--network", "sepolia", "--env-file", "deploy.env"]) == 1
        assert "deploy.env" in capsys.readouterr().err
