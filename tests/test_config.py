"""Tests for simulation configuration."""

from gridiron.config import SimulationConfig, get_config, set_config


class TestSimulationConfig:
    """Tests for SimulationConfig."""

    def test_defaults(self):
        config = SimulationConfig()
        assert config.weeks == 18
        assert config.meetings == 1
        assert config.min_rematch_gap == 2
        assert config.overtime is True
        assert config.validate() == []

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("GRIDIRON_WEEKS", "17")
        monkeypatch.setenv("GRIDIRON_MEETINGS", "2")
        monkeypatch.setenv("GRIDIRON_OVERTIME", "False")
        monkeypatch.setenv("GRIDIRON_WORKER_TIMEOUT", "2.5")

        config = SimulationConfig.from_env()

        assert config.weeks == 17
        assert config.meetings == 2
        assert config.overtime is False
        assert config.worker_timeout_seconds == 2.5

    def test_validate_reports_each_problem(self):
        config = SimulationConfig(weeks=0, meetings=0, min_rematch_gap=-1, worker_timeout_seconds=0)
        errors = config.validate()
        assert len(errors) == 4
        assert any("GRIDIRON_WEEKS" in e for e in errors)


class TestGlobalConfig:
    """Tests for get_config/set_config."""

    def test_get_config_cached(self):
        assert get_config() is get_config()

    def test_set_config(self):
        config = SimulationConfig(weeks=10)
        set_config(config)
        assert get_config() is config

    def test_reset_rereads_environment(self, monkeypatch):
        get_config()
        monkeypatch.setenv("GRIDIRON_WEEKS", "12")
        set_config(None)
        assert get_config().weeks == 12
