"""Tests for operator configuration loading."""

import pytest

from garmgcp.config import CONFIG_ENV_VAR, ConfigManager, load_config
from garmgcp.errors import ConfigError


@pytest.fixture
def config_file(tmp_path):
    """Create a provider config file."""
    path = tmp_path / "garm-provider-gcp.yaml"
    path.write_text("""
gcp:
  project_id: ci-project
  zone: europe-west1-b
  network_id: projects/ci-project/global/networks/ci
  subnetwork_id: projects/ci-project/regions/europe-west1/subnetworks/ci
logging:
  log_level: debug
""")
    return path


class TestConfigManager:
    """Test ConfigManager."""

    def test_load(self, config_file):
        config = ConfigManager(config_file).load()

        assert config.gcp.project_id == "ci-project"
        assert config.gcp.zone == "europe-west1-b"
        assert config.gcp.network_id == "projects/ci-project/global/networks/ci"
        assert config.gcp.subnetwork_id.endswith("/subnetworks/ci")
        assert config.logging.log_level == "DEBUG"

    def test_path_from_environment(self, config_file, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        manager = ConfigManager()

        assert manager.config_path == config_file
        assert load_config().gcp.zone == "europe-west1-b"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            ConfigManager(tmp_path / "missing.yaml").load()

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        config = ConfigManager(path).load()

        assert config.gcp.zone == ""
        assert config.logging.log_level == "INFO"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("gcp: [unclosed\n")

        with pytest.raises(ConfigError, match="Failed to parse"):
            ConfigManager(path).load()

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="must be a mapping"):
            ConfigManager(path).load()

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("logging:\n  log_level: LOUD\n")

        with pytest.raises(ConfigError, match="log_level"):
            ConfigManager(path).load()
