"""Tests for logging helpers."""
import logging

import pytest

import chilipy
from chilipy.core.logging import get_logger


class TestGetLogger:
    """Test suite for get_logger."""
    
    def test_returns_named_logger(self):
        logger = get_logger('chilipy.test')
        
        assert logger is logging.getLogger('chilipy.test')
        assert logger.propagate is True
    
    def test_default_level_without_root_handlers(self, monkeypatch):
        """Test that WARNING is used when logging was never configured."""
        root = logging.getLogger()
        monkeypatch.setattr(root, 'handlers', [])
        
        logger = get_logger('chilipy.test.unconfigured')
        
        assert logger.level == logging.WARNING
    
    def test_level_left_alone_with_root_handlers(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, 'handlers', [logging.NullHandler()])
        
        logger = get_logger('chilipy.test.configured')
        
        assert logger.level == logging.NOTSET


class TestSetupLogging:
    """Test suite for setup_logging."""
    
    @pytest.fixture(autouse=True)
    def restore_levels(self):
        names = ['chilipy', 'chilipy.client', 'chilipy.api', 'chilipy.path']
        saved = {name: logging.getLogger(name).level for name in names}
        yield
        for name, level in saved.items():
            logging.getLogger(name).setLevel(level)
    
    def test_sets_package_levels(self):
        chilipy.setup_logging(logging.DEBUG)
        
        for name in ('chilipy', 'chilipy.client', 'chilipy.api', 'chilipy.path'):
            assert logging.getLogger(name).level == logging.DEBUG
