"""Tests for rn_app_icons/logger.py"""

import logging
import logging.handlers

import pytest
from colorama import Fore, Style

from rn_app_icons.logger import (
    AppIconsLogger, ColoredFormatter, get_logger, set_log_level,
)


def make_record(level, msg='Test message'):
    return logging.LogRecord(
        name='test', level=level, pathname='', lineno=0,
        msg=msg, args=(), exc_info=None
    )


class TestColoredFormatter:
    """Test cases for ColoredFormatter"""

    def test_info_uncolored(self):
        """Test INFO messages are left plain"""
        formatter = ColoredFormatter('%(levelname)s - %(message)s')
        assert formatter.format(make_record(logging.INFO)) == 'INFO - Test message'

    def test_warning_colored(self):
        """Test WARNING messages are wrapped in yellow"""
        formatter = ColoredFormatter('%(message)s')
        result = formatter.format(make_record(logging.WARNING))
        assert result == f'{Fore.YELLOW}Test message{Style.RESET_ALL}'


class TestAppIconsLogger:
    """Test cases for AppIconsLogger"""

    @pytest.fixture(autouse=True)
    def reset_logger(self):
        """Reset logger state around each test"""
        saved = dict(AppIconsLogger._loggers)
        state = (AppIconsLogger._initialized, AppIconsLogger._log_dir)
        AppIconsLogger._loggers.clear()
        AppIconsLogger._initialized = False
        AppIconsLogger._log_dir = None
        yield
        for logger in AppIconsLogger._loggers.values():
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
        AppIconsLogger._loggers.clear()
        AppIconsLogger._loggers.update(saved)
        AppIconsLogger._initialized, AppIconsLogger._log_dir = state

    @pytest.mark.parametrize('text,expected', [
        ('10MB', 10 * 1024 * 1024),
        ('500KB', 500 * 1024),
        ('2GB', 2 * 1024 * 1024 * 1024),
        ('128B', 128),
        ('invalid', 10 * 1024 * 1024),
    ])
    def test_parse_size(self, text, expected):
        assert AppIconsLogger._parse_size(text) == expected

    def test_initialize(self, tmp_path):
        """Test explicit initialization values"""
        AppIconsLogger.initialize(log_dir=str(tmp_path), console_level='WARNING',
                                  file_level='INFO', console_simple_format=False,
                                  file_enabled=False)

        assert AppIconsLogger._initialized is True
        assert AppIconsLogger._log_dir == tmp_path
        assert AppIconsLogger._console_level == logging.WARNING
        assert AppIconsLogger._file_level == logging.INFO

    def test_console_only(self, tmp_path):
        """Test a console-only logger has one stream handler"""
        AppIconsLogger.initialize(log_dir=str(tmp_path), file_enabled=False)
        logger = get_logger('rn_app_icons.test_console')

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert logger.propagate is False

    def test_file_logging(self, tmp_path):
        """Test a rotating file handler is added when enabled"""
        log_dir = tmp_path / 'logs'
        AppIconsLogger.initialize(log_dir=str(log_dir), file_enabled=True)
        logger = get_logger('rn_app_icons.test_file')
        logger.info('hello')

        assert log_dir.is_dir()
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)
        assert 'hello' in (log_dir / 'rn-app-icons.log').read_text(encoding='utf-8')

    def test_logger_cached(self, tmp_path):
        """Test the same name returns the same logger"""
        AppIconsLogger.initialize(log_dir=str(tmp_path), file_enabled=False)
        assert get_logger('rn_app_icons.same') is get_logger('rn_app_icons.same')

    def test_set_level_console(self, tmp_path):
        """Test console handlers pick up a new level"""
        AppIconsLogger.initialize(log_dir=str(tmp_path), console_level='INFO', file_enabled=False)
        logger = get_logger('rn_app_icons.level')

        set_log_level('ERROR', 'console')

        assert logger.handlers[0].level == logging.ERROR

