"""Animator package for algorithm playback."""

from .pygame_framer import PygameFramer, KEY_COMMANDS
from .animator import Animator

__all__ = ['PygameFramer', 'KEY_COMMANDS', 'Animator']
