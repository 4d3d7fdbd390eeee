"""Unit tests for application settings configuration."""

from pathlib import Path

from warranty_portal.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_relative_fixtures_file_resolves_against_backend_dir():
    settings = Settings(fixtures_file="data/fixtures.yaml")
    expected = Path(__file__).resolve().parents[2] / "data" / "fixtures.yaml"
    assert settings.fixtures_path == expected
    assert settings.fixtures_path.exists()


def test_absolute_fixtures_file_is_kept(tmp_path):
    target = tmp_path / "other.yaml"
    settings = Settings(fixtures_file=str(target))
    assert settings.fixtures_path == target


def test_upload_limit_in_bytes():
    assert Settings(max_upload_size_mb=2).max_upload_size_bytes == 2 * 1024 * 1024
