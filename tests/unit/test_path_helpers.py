"""Unit tests for path helper functions."""

from pathlib import Path

from evm_deployments.paths import (
    get_default_artifacts_dir,
    get_default_plan_path,
    resolve_artifacts_dir,
)


class TestGetDefaultArtifactsDir:
    """Test the get_default_artifacts_dir function."""

    def test_returns_artifacts_in_cwd(self, tmp_path: Path, monkeypatch):
        """Test that ./artifacts is the default."""
        monkeypatch.chdir(tmp_path)

        assert get_default_artifacts_dir() == tmp_path / "artifacts"

    def test_ignores_zksync_artifacts(self, tmp_path: Path, monkeypatch):
        """Test that ./artifacts-zk does not replace ./artifacts."""
        (tmp_path / "artifacts").mkdir()
        (tmp_path / "artifacts-zk").mkdir()
        monkeypatch.chdir(tmp_path)

        assert get_default_artifacts_dir() == tmp_path / "artifacts"

    def test_returns_absolute_path(self):
        """Test that returned path is absolute."""
        assert get_default_artifacts_dir().is_absolute()


class TestGetDefaultPlanPath:
    """Test the get_default_plan_path function."""

    def test_default_filename(self, tmp_path: Path, monkeypatch):
        """Test that the default plan is ./deploy-plan.json."""
        monkeypatch.chdir(tmp_path)

        assert get_default_plan_path() == tmp_path / "deploy-plan.json"


class TestResolveArtifactsDir:
    """Test the resolve_artifacts_dir function."""

    def test_none_uses_default(self, tmp_path: Path, monkeypatch):
        """Test that None falls back to the default directory."""
        monkeypatch.chdir(tmp_path)

        assert resolve_artifacts_dir(None) == tmp_path / "artifacts"

    def test_relative_path_made_absolute(self, tmp_path: Path, monkeypatch):
        """Test that relative paths are converted to absolute."""
        monkeypatch.chdir(tmp_path)

        result = resolve_artifacts_dir("build/artifacts")

        assert result.is_absolute()
        assert result == tmp_path / "build" / "artifacts"

    def test_accepts_string_and_path(self, tmp_path: Path):
        """Test that str and Path arguments are equivalent."""
        assert resolve_artifacts_dir(str(tmp_path)) == resolve_artifacts_dir(tmp_path)
