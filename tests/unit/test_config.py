"""Unit tests for configuration and constants."""

from __future__ import annotations

from pathlib import Path

import pytest

from courier.config import ConfigLoader, CourierConfig
from courier.constants import Defaults, EnvVars, FormatVersions, LogLevels


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (EnvVars.FORMATS, EnvVars.MAX_AGE_MONTHS, EnvVars.VERBOSITY):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestCourierConfig:
    """Test suite for CourierConfig class."""

    def test_default_config(self):
        config = CourierConfig()

        assert config.supported_formats == ("4.0", "3.1")
        assert config.max_age_months == 1
        assert config.verbosity == 0

    def test_custom_config(self):
        config = CourierConfig(
            supported_formats=("5.0",), max_age_months=6, verbosity=2
        )

        assert config.supported_formats == ("5.0",)
        assert config.max_age_months == 6
        assert config.verbosity == 2

    def test_config_is_immutable(self):
        config = CourierConfig()

        with pytest.raises(Exception):  # FrozenInstanceError
            config.max_age_months = 2

    def test_config_validation_formats(self):
        with pytest.raises(ValueError, match="at least one version"):
            CourierConfig(supported_formats=())

        with pytest.raises(ValueError, match="blank versions"):
            CourierConfig(supported_formats=("4.0", "  "))

    def test_config_validation_max_age_months(self):
        CourierConfig(max_age_months=1)
        CourierConfig(max_age_months=12)

        with pytest.raises(ValueError, match="max_age_months must be positive"):
            CourierConfig(max_age_months=0)

        with pytest.raises(ValueError, match="max_age_months must be positive"):
            CourierConfig(max_age_months=-1)

    def test_config_validation_verbosity(self):
        CourierConfig(verbosity=0)
        CourierConfig(verbosity=2)

        with pytest.raises(ValueError, match="verbosity must be between"):
            CourierConfig(verbosity=3)

        with pytest.raises(ValueError, match="verbosity must be between"):
            CourierConfig(verbosity=-1)

    def test_from_env_defaults(self, clean_env: pytest.MonkeyPatch):
        assert CourierConfig.from_env() == CourierConfig()

    def test_from_env(self, clean_env: pytest.MonkeyPatch):
        clean_env.setenv(EnvVars.FORMATS, "4.0, 5.0,,")
        clean_env.setenv(EnvVars.MAX_AGE_MONTHS, "2")
        clean_env.setenv(EnvVars.VERBOSITY, "1")

        config = CourierConfig.from_env()

        assert config.supported_formats == ("4.0", "5.0")
        assert config.max_age_months == 2
        assert config.verbosity == 1

    def test_from_env_invalid_number(self, clean_env: pytest.MonkeyPatch):
        clean_env.setenv(EnvVars.MAX_AGE_MONTHS, "soon")

        with pytest.raises(ValueError, match=EnvVars.MAX_AGE_MONTHS):
            CourierConfig.from_env()

    def test_from_env_invalid_verbosity(self, clean_env: pytest.MonkeyPatch):
        clean_env.setenv(EnvVars.VERBOSITY, "loud")

        with pytest.raises(ValueError, match=f"{EnvVars.VERBOSITY} must be an integer"):
            CourierConfig.from_env()


class TestConfigLoader:
    """Test suite for ConfigLoader."""

    def test_load_without_file(self, clean_env: pytest.MonkeyPatch, tmp_path: Path):
        config = ConfigLoader.load(tmp_path / "missing.toml")

        assert config == CourierConfig()

    def test_load_default_file_from_cwd(
        self, clean_env: pytest.MonkeyPatch, tmp_path: Path
    ):
        (tmp_path / "courier.toml").write_text(
            "[dispatch]\nmax_age_months = 4\n", encoding="utf-8"
        )
        clean_env.chdir(tmp_path)

        assert ConfigLoader.load().max_age_months == 4

    def test_load_from_toml(self, clean_env: pytest.MonkeyPatch, tmp_path: Path):
        config_file = tmp_path / "courier.toml"
        config_file.write_text(
            '[dispatch]\nsupported_formats = ["4.0", "4.1"]\nmax_age_months = 2\n\n'
            "[logging]\nverbosity = 1\n",
            encoding="utf-8",
        )

        config = ConfigLoader.load(config_file)

        assert config.supported_formats == ("4.0", "4.1")
        assert config.max_age_months == 2
        assert config.verbosity == 1

    def test_toml_overrides_env(self, clean_env: pytest.MonkeyPatch, tmp_path: Path):
        clean_env.setenv(EnvVars.MAX_AGE_MONTHS, "5")
        clean_env.setenv(EnvVars.VERBOSITY, "2")
        config_file = tmp_path / "courier.toml"
        config_file.write_text("[dispatch]\nmax_age_months = 3\n", encoding="utf-8")

        config = ConfigLoader.load(config_file)

        assert config.max_age_months == 3
        assert config.verbosity == 2

    def test_formats_as_comma_separated_string(
        self, clean_env: pytest.MonkeyPatch, tmp_path: Path
    ):
        config_file = tmp_path / "courier.toml"
        config_file.write_text(
            '[dispatch]\nsupported_formats = "3.1, 3.2"\n', encoding="utf-8"
        )

        assert ConfigLoader.load(config_file).supported_formats == ("3.1", "3.2")

    def test_numeric_formats_rejected(
        self, clean_env: pytest.MonkeyPatch, tmp_path: Path
    ):
        config_file = tmp_path / "courier.toml"
        config_file.write_text(
            "[dispatch]\nsupported_formats = [4.0]\n", encoding="utf-8"
        )

        with pytest.raises(ValueError, match="dispatch.supported_formats"):
            ConfigLoader.load(config_file)

    def test_non_numeric_max_age_names_key(
        self, clean_env: pytest.MonkeyPatch, tmp_path: Path
    ):
        config_file = tmp_path / "courier.toml"
        config_file.write_text(
            "[dispatch]\nmax_age_months = \"abc\"\n", encoding="utf-8"
        )

        with pytest.raises(ValueError, match=r"dispatch\.max_age_months must be an integer"):
            ConfigLoader.load(config_file)

    def test_non_numeric_verbosity_names_key(
        self, clean_env: pytest.MonkeyPatch, tmp_path: Path
    ):
        config_file = tmp_path / "courier.toml"
        config_file.write_text("[logging]\nverbosity = \"max\"\n", encoding="utf-8")

        with pytest.raises(ValueError, match=r"logging\.verbosity must be an integer"):
            ConfigLoader.load(config_file)

    def test_bool_max_age_rejected(
        self, clean_env: pytest.MonkeyPatch, tmp_path: Path
    ):
        config_file = tmp_path / "courier.toml"
        config_file.write_text("[dispatch]\nmax_age_months = true\n", encoding="utf-8")

        with pytest.raises(ValueError, match="got bool"):
            ConfigLoader.load(config_file)

    def test_malformed_toml_warns_and_keeps_env(
        self, clean_env: pytest.MonkeyPatch, tmp_path: Path
    ):
        clean_env.setenv(EnvVars.MAX_AGE_MONTHS, "2")
        config_file = tmp_path / "courier.toml"
        config_file.write_text("[dispatch\nmax_age_months = ", encoding="utf-8")

        with pytest.warns(UserWarning, match="Failed to load config"):
            config = ConfigLoader.load(config_file)

        assert config.max_age_months == 2


class TestConstants:
    def test_supported_versions(self):
        assert FormatVersions.SUPPORTED == ("4.0", "3.1")

    def test_defaults(self):
        assert Defaults.MAX_AGE_MONTHS == 1
        assert Defaults.CONFIG_FILE == "courier.toml"

    def test_log_levels_are_ordered(self):
        assert LogLevels.NORMAL < LogLevels.VERBOSE < LogLevels.DEBUG
