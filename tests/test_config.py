import pytest

from wrapsnake.app import load_config
from wrapsnake.config import GameConfig
from wrapsnake.errors import InvalidConfiguration


class TestGameConfig:
    """Tests for config defaults and validation."""

    def test_defaults(self):
        config = GameConfig()
        assert (config.width, config.height) == (25, 25)
        assert config.tick_interval_ms == 500
        assert config.food_spawn_interval_ms == 3000
        assert config.food_ttl_ms == 10000
        assert config.food_expiry_check_ms == 1000

    @pytest.mark.parametrize(
        "field",
        ["width", "height", "tick_interval_ms", "food_spawn_interval_ms", "food_ttl_ms", "food_expiry_check_ms"],
    )
    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_values_rejected(self, field, value):
        with pytest.raises(InvalidConfiguration):
            GameConfig(**{field: value})

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidConfiguration):
            GameConfig(width=12.5)
        with pytest.raises(InvalidConfiguration):
            GameConfig(height=True)

    def test_grid_must_fit_start_snake(self):
        with pytest.raises(InvalidConfiguration):
            GameConfig(width=2)

    def test_unknown_log_level(self):
        with pytest.raises(InvalidConfiguration):
            GameConfig(log_level="LOUD")

    def test_invalid_configuration_is_value_error(self):
        with pytest.raises(ValueError):
            GameConfig(tick_interval_ms=0)

    def test_overrides_skip_none(self):
        config = GameConfig().with_overrides(width=30, height=None)
        assert config.width == 30
        assert config.height == 25


class TestFromEnv:
    def test_reads_prefixed_variables(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WRAPSNAKE_WIDTH", "40")
        monkeypatch.setenv("WRAPSNAKE_TICK_MS", "250")
        monkeypatch.setenv("WRAPSNAKE_LOG_LEVEL", "debug")
        config = GameConfig.from_env(env_file=tmp_path / "missing.env")
        assert config.width == 40
        assert config.height == 25
        assert config.tick_interval_ms == 250
        assert config.log_level == "DEBUG"

    def test_reads_dotenv_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("WRAPSNAKE_HEIGHT=18\nWRAPSNAKE_SEED=99\n")
        config = GameConfig.from_env(env_file=env_file)
        assert config.height == 18
        assert config.seed == 99

    def test_process_env_wins_over_dotenv(self, monkeypatch, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("WRAPSNAKE_FOOD_TTL_MS=5000\n")
        monkeypatch.setenv("WRAPSNAKE_FOOD_TTL_MS", "7000")
        assert GameConfig.from_env(env_file=env_file).food_ttl_ms == 7000

    def test_malformed_value(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WRAPSNAKE_SPAWN_MS", "soon")
        with pytest.raises(InvalidConfiguration):
            GameConfig.from_env(env_file=tmp_path / "missing.env")

    def test_overrides_win_over_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WRAPSNAKE_WIDTH", "40")
        config = GameConfig.from_env(env_file=tmp_path / "missing.env", width=12)
        assert config.width == 12


class TestCommandLine:
    def test_flags_build_config(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        config = load_config(["--width", "30", "--tick-ms", "200", "--seed", "4", "--log-level", "warning"])
        assert config.width == 30
        assert config.tick_interval_ms == 200
        assert config.seed == 4
        assert config.log_level == "WARNING"

    def test_invalid_flag_value_rejected(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(InvalidConfiguration):
            load_config(["--food-ttl-ms", "0"])
