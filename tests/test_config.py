"""Tests for configuration and logging helpers."""

import json

import numpy as np
import pytest
import yaml

from connectfour.utils import (
    Config,
    BoardConfig,
    GameRecord,
    Logger,
    get_default_config,
    set_seed,
)


class TestConfig:
    def test_defaults(self):
        config = get_default_config()
        assert (config.board.width, config.board.height) == (7, 6)
        assert (config.players.color1, config.players.color2) == ("red", "yellow")
        assert config.log_dir is None

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.yaml"
        config = Config(board=BoardConfig(width=9, height=7), seed=3)
        config.save(str(path))

        loaded = Config.load(str(path))
        assert loaded == config

    def test_partial_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"players": {"color2": "cyan"}}))

        config = Config.load(str(path))
        assert config.players.color1 == "red"
        assert config.players.color2 == "cyan"
        assert config.board.width == 7

    @pytest.mark.parametrize("width,height", [(0, 6), (7, 0), (-1, -1)])
    def test_invalid_board(self, width, height):
        with pytest.raises(ValueError):
            BoardConfig(width=width, height=height)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"board": {"depth": 3}}))
        with pytest.raises(TypeError):
            Config.load(str(path))

    def test_ensure_dirs(self, tmp_path):
        config = Config(log_dir=str(tmp_path / "logs" / "games"))
        config.ensure_dirs()
        assert (tmp_path / "logs" / "games").is_dir()


class TestLogger:
    def test_writes_jsonl(self, tmp_path):
        logger = Logger(log_dir=str(tmp_path), verbose=False)
        logger.log_game(GameRecord(game=1, outcome="won", winner="Player1", moves=7, width=7, height=6))
        logger.log_game(GameRecord(game=2, outcome="tied", winner=None, moves=42, width=7, height=6))

        lines = logger.log_file.read_text().splitlines()
        assert len(lines) == 2
        first = json.loads(lines[0])
        assert first["winner"] == "Player1"
        assert first["timestamp"]
        assert json.loads(lines[1])["outcome"] == "tied"

    def test_messages_print_when_verbose(self, capsys):
        logger = Logger()
        logger.log_info("Restarting...")
        logger.log_error("Column 9 is full")
        logger.log_success("Player1 won!")
        logger.log_warning("Tie!")

        out = capsys.readouterr().out
        for message in ["Restarting...", "Column 9 is full", "Player1 won!", "Tie!"]:
            assert message in out

    def test_quiet_logger_prints_nothing(self, capsys):
        logger = Logger(verbose=False)
        logger.log_error("Column 9 is full")
        logger.log_game(GameRecord(game=1, outcome="tied", winner=None, moves=42, width=7, height=6))
        assert capsys.readouterr().out == ""

    def test_no_file_without_log_dir(self):
        logger = Logger(verbose=False)
        logger.log_game(GameRecord(game=1, outcome="tied", winner=None, moves=42, width=7, height=6))
        assert logger.log_file is None
        assert len(logger.history) == 1


class TestSeed:
    def test_same_seed_same_stream(self):
        a = set_seed(7).integers(0, 7, size=20)
        b = set_seed(7).integers(0, 7, size=20)
        assert np.array_equal(a, b)

    def test_global_state_untouched(self):
        before = np.random.get_state()[1].copy()
        set_seed(123)
        assert np.array_equal(np.random.get_state()[1], before)
