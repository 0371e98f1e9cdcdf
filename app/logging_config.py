"""
Logging configuration for the chart gallery
"""
import logging
import logging.handlers
from pathlib import Path

from config import AppConfig

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_configured = False


def setup_logging(cfg: AppConfig) -> Path:
    """Configure logging for the entire application.

    Streamlit re-executes the script on every interaction, so repeated calls
    are no-ops once handlers are installed. Returns the log directory.
    """
    global _configured

    logs_dir = Path(cfg.log_dir)
    if _configured:
        return logs_dir
    logs_dir.mkdir(parents=True, exist_ok=True)

    level = getattr(logging, cfg.log_level, logging.INFO)

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Console handler (for development)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    # Gallery file handler (all logs)
    gallery_handler = logging.handlers.RotatingFileHandler(
        logs_dir / "gallery.log",
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5
    )
    gallery_handler.setLevel(level)
    gallery_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(gallery_handler)

    # Audio-specific handler (microphone monitor + meter)
    audio_logger = logging.getLogger('audio')
    audio_handler = logging.handlers.RotatingFileHandler(
        logs_dir / "audio.log",
        maxBytes=5*1024*1024,  # 5MB
        backupCount=3
    )
    audio_handler.setLevel(logging.DEBUG)
    audio_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt=DATE_FORMAT
    ))
    audio_logger.addHandler(audio_handler)
    audio_logger.setLevel(logging.DEBUG)

    # Error file handler (errors only)
    error_handler = logging.handlers.RotatingFileHandler(
        logs_dir / "errors.log",
        maxBytes=5*1024*1024,  # 5MB
        backupCount=3
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s\n%(pathname)s:%(lineno)d',
        datefmt=DATE_FORMAT
    ))
    root_logger.addHandler(error_handler)

    _configured = True
    logging.info("Logging configured (level=%s, dir=%s)", cfg.log_level, logs_dir)
    return logs_dir
