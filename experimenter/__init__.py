"""Experimenter package for running algorithm playback sessions."""

from .config import create_default_config, create_test_config
from .logger import Logger

__all__ = ['create_default_config', 'create_test_config', 'Logger']
