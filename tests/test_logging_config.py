import importlib
import logging
from unittest.mock import patch

from app.core import config
from app.utils.logging_config import ColoredFormatter, setup_logging


def test_setup_logging_installs_console_and_file(tmp_path):
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        setup_logging(level="debug", log_dir=str(tmp_path / "logs"))
        kinds = {type(h) for h in root.handlers}
        assert logging.StreamHandler in kinds
        assert logging.FileHandler in kinds
        assert root.level == logging.DEBUG
        assert list((tmp_path / "logs").glob("bugs_*.log"))
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved[0]:
            root.addHandler(handler)
        root.setLevel(saved[1])


def test_unknown_level_name_falls_back_to_info(tmp_path):
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        setup_logging(level="chatty", log_dir=str(tmp_path))
        assert root.level == logging.INFO
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved[0]:
            root.addHandler(handler)
        root.setLevel(saved[1])


def test_colored_formatter_wraps_levels():
    record = logging.LogRecord("app", logging.WARNING, __file__, 1, "careful", None, None)
    out = ColoredFormatter().format(record)
    assert out.startswith(ColoredFormatter.yellow)
    assert "careful" in out


def test_importing_main_sets_up_logging():
    import main

    with patch("app.utils.logging_config.setup_logging") as mock_setup:
        importlib.reload(main)
    mock_setup.assert_called_once_with(level=config.LOG_LEVEL, log_dir=config.LOG_DIR)
