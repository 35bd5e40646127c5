"""Unit tests for path helper functions."""

from pathlib import Path

from rwa_deployments.paths import get_default_modules_dir, get_plan_path


class TestGetDefaultModulesDir:
    """Test the get_default_modules_dir function."""

    def test_returns_path_under_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        modules_dir = get_default_modules_dir()

        assert modules_dir == tmp_path.resolve() / "ignition" / "modules"

    def test_returns_absolute_path(self):
        assert get_default_modules_dir().is_absolute()


class TestGetPlanPath:
    """Test the get_plan_path function."""

    def test_default_root_is_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert get_plan_path("sepolia") == (
            tmp_path.resolve() / "ignition" / "deployments" / "sepolia" / "plan.json"
        )

    def test_custom_root(self, tmp_path: Path):
        path = get_plan_path("mainnet", root=tmp_path)

        assert path.parent == tmp_path / "ignition" / "deployments" / "mainnet"
        assert path.name == "plan.json"

    def test_custom_root_as_string(self, tmp_path: Path):
        assert get_plan_path("sepolia", root=str(tmp_path)).is_relative_to(tmp_path)

    def test_relative_root_converted_to_absolute(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        path = get_plan_path("sepolia", root="project")

        assert path.is_absolute()
        assert path.parts[-5] == "project"
