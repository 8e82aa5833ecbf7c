"""
Tests for infrastructure components (StrategyRegistry, config loading, logging).

These tests verify that core infrastructure works correctly.
"""

import logging

import pytest
import yaml
from pathlib import Path


PROJECT_ROOT = Path(__file__).parent.parent


class TestStrategyRegistry:
    """Tests for the StrategyRegistry class."""

    def test_registry_lists_difficulties(self):
        """Test that all three difficulties are registered."""
        from snake_duel.ai import StrategyRegistry

        strategies = StrategyRegistry.list_strategies()

        assert isinstance(strategies, list)
        for strategy_id in ("easy", "medium", "hard"):
            assert strategy_id in strategies

    def test_registry_get_strategy(self):
        from snake_duel.ai import HardStrategy, StrategyRegistry

        data = StrategyRegistry.get_strategy("hard")

        assert data is not None
        assert data['strategy_class'] is HardStrategy

    def test_registry_get_strategy_unknown(self):
        """Test getting unknown strategy returns None."""
        from snake_duel.ai import StrategyRegistry

        assert StrategyRegistry.get_strategy("nightmare") is None

    def test_registry_is_available(self):
        from snake_duel.ai import StrategyRegistry

        assert StrategyRegistry.is_available("medium") is True
        assert StrategyRegistry.is_available("nightmare") is False

    def test_registry_descriptions(self):
        from snake_duel.ai import StrategyRegistry

        assert "A*" in StrategyRegistry.get_description("medium")
        assert StrategyRegistry.get_description("nightmare") == ""

    def test_registry_create(self):
        """Test creating a strategy passes config and random source through."""
        import random

        from snake_duel.ai import EasyStrategy, StrategyRegistry
        from snake_duel.game.grid import Grid
        from snake_duel.utils.config_loader import AIConfig

        rng = random.Random(3)
        strategy = StrategyRegistry.create("easy", Grid(30, 20), AIConfig(easy_food_bias=0.5), rng)

        assert isinstance(strategy, EasyStrategy)
        assert strategy.food_bias == 0.5
        assert strategy.rng is rng

    def test_registry_create_unknown(self):
        """Test creating unknown strategy raises error."""
        from snake_duel.ai import StrategyRegistry
        from snake_duel.game.grid import Grid

        with pytest.raises(ValueError, match="Unknown strategy"):
            StrategyRegistry.create("nightmare", Grid(30, 20))


class TestConfigLoading:
    """Tests for configuration loading."""

    def test_load_default_config_file(self):
        """Test the shipped default config loads with the documented values."""
        from snake_duel.utils.config_loader import load_config

        config = load_config(str(PROJECT_ROOT / "config" / "default.yaml"))

        assert config.game.grid_width == 30
        assert config.game.grid_height == 20
        assert config.game.difficulty == "medium"
        assert config.speed.easy == 150
        assert config.ai.hard_search_depth == 3

    def test_missing_file_gives_defaults(self, tmp_path):
        from snake_duel.utils.config_loader import Config, load_config

        config = load_config(str(tmp_path / "nope.yaml"))

        assert config == Config()

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        from snake_duel.utils.config_loader import load_config

        path = tmp_path / "config.yaml"
        path.write_text("game:\n  difficulty: hard\n  unknown_key: 1\n")

        config = load_config(str(path))

        assert config.game.difficulty == "hard"
        assert config.game.grid_width == 30
        assert config.ai.medium_flood_fill_cap == 20

    def test_empty_file_gives_defaults(self, tmp_path):
        from snake_duel.utils.config_loader import Config, load_config

        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(str(path)) == Config()

    @pytest.mark.parametrize("data", [
        {"game": {"difficulty": "impossible"}},
        {"game": {"grid_width": 0}},
        {"ai": {"easy_food_bias": 1.5}},
        {"ai": {"hard_search_depth": 0}},
    ])
    def test_invalid_values_raise(self, data):
        from snake_duel.utils.config_loader import ConfigError, config_from_dict

        with pytest.raises(ConfigError):
            config_from_dict(data)

    def test_config_error_is_value_error(self):
        from snake_duel.utils.config_loader import ConfigError

        assert issubclass(ConfigError, ValueError)

    def test_save_and_reload(self, tmp_path):
        from snake_duel.utils.config_loader import Config, GameConfig, load_config, save_config

        config = Config(game=GameConfig(difficulty="easy", grid_width=40))
        path = tmp_path / "saved.yaml"

        save_config(config, str(path))

        with open(path) as f:
            assert yaml.safe_load(f)["game"]["grid_width"] == 40
        assert load_config(str(path)) == config

    def test_interval_for_unknown_difficulty(self):
        from snake_duel.utils.config_loader import SpeedConfig

        assert SpeedConfig().interval_for("hard") == 80
        assert SpeedConfig().interval_for("other") == 100


class TestLoggingSetup:
    """Tests for logging configuration."""

    def test_level_and_file_handler(self, tmp_path):
        from snake_duel.utils.config_loader import LoggingConfig
        from snake_duel.utils.logging_setup import setup_logging

        log_file = tmp_path / "logs" / "duel.log"
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level

        try:
            setup_logging(LoggingConfig(level="debug", log_file=str(log_file)))

            assert root.level == logging.DEBUG
            assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
            assert log_file.parent.exists()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers = saved_handlers
            root.setLevel(saved_level)
