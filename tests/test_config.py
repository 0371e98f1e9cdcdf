"""
Environment-driven configuration.
"""

import logging

import pytest

import logging_config
from config import CATEGORY_ALL, get_config

ENV_KEYS = [
    "GALLERY_DEFAULT_CATEGORY",
    "GALLERY_RANDOM_SEED",
    "MIC_SAMPLE_INTERVAL_S",
    "MIC_WINDOW",
    "MIC_MIN_DECIBELS",
    "LOG_LEVEL",
    "LOG_DIR",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestGetConfig:
    """Defaults and parsing."""

    def test_defaults(self, clean_env):
        cfg = get_config()
        assert cfg.default_category == CATEGORY_ALL
        assert cfg.random_seed is None
        assert cfg.mic_sample_interval_s == 0.1
        assert cfg.mic_window == 30
        assert cfg.mic_min_decibels == -80.0
        assert cfg.log_level == "INFO"
        assert cfg.log_dir == "logs"

    def test_overrides(self, clean_env):
        clean_env.setenv("GALLERY_DEFAULT_CATEGORY", "Bar")
        clean_env.setenv("GALLERY_RANDOM_SEED", "42")
        clean_env.setenv("MIC_WINDOW", "50")
        clean_env.setenv("LOG_LEVEL", "debug")
        cfg = get_config()
        assert cfg.default_category == "bar"
        assert cfg.random_seed == 42
        assert cfg.mic_window == 50
        assert cfg.log_level == "DEBUG"

    def test_blank_values_use_defaults(self, clean_env):
        clean_env.setenv("MIC_WINDOW", "   ")
        assert get_config().mic_window == 30

    @pytest.mark.parametrize(
        "key,value",
        [
            ("GALLERY_RANDOM_SEED", "abc"),
            ("MIC_SAMPLE_INTERVAL_S", "fast"),
            ("MIC_SAMPLE_INTERVAL_S", "0"),
            ("MIC_WINDOW", "0"),
        ],
    )
    def test_invalid_values(self, clean_env, key, value):
        clean_env.setenv(key, value)
        with pytest.raises(ValueError):
            get_config()


class TestSetupLogging:
    """Log handlers are installed once."""

    def test_creates_log_files_once(self, clean_env, tmp_path):
        clean_env.setenv("LOG_DIR", str(tmp_path / "logs"))
        cfg = get_config()
        root = logging.getLogger()
        audio = logging.getLogger("audio")
        before_root, before_audio = list(root.handlers), list(audio.handlers)
        clean_env.setattr(logging_config, "_configured", False)
        try:
            logs_dir = logging_config.setup_logging(cfg)
            added = len(root.handlers) - len(before_root)
            logging_config.setup_logging(cfg)
            assert len(root.handlers) - len(before_root) == added == 3
            assert (logs_dir / "gallery.log").exists()
            assert (logs_dir / "errors.log").exists()
            assert (logs_dir / "audio.log").exists()
        finally:
            for handler in root.handlers[len(before_root):]:
                root.removeHandler(handler)
                handler.close()
            for handler in audio.handlers[len(before_audio):]:
                audio.removeHandler(handler)
                handler.close()
