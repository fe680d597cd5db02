"""Plotter module for charting operation counts during playback."""

from .plotter import Plotter, MatplotlibPlotter, SERIES, create_plotter

__all__ = ['Plotter', 'MatplotlibPlotter', 'SERIES', 'create_plotter']
