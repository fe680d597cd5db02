"""Abstract plotter interface and implementations for operation counts."""

from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, List, Optional, Tuple

import matplotlib
import numpy as np

from steps import StepKind

# Plotted series -> step kinds counted into them
SERIES: Dict[str, Tuple[StepKind, ...]] = {
    'compares': (StepKind.COMPARE,),
    'swaps': (StepKind.SWAP,),
    'writes': (StepKind.OVERWRITE, StepKind.MERGE, StepKind.DISTRIBUTE, StepKind.COLLECT),
    'visits': (StepKind.VISIT,),
}


class Plotter(ABC):
    """
    Abstract base class for plotters.

    Defines the interface that all plotter implementations must follow.
    """

    def __init__(self, config, title: Optional[str] = None):
        """
        Initialize plotter.

        Args:
            config: Configuration object
            title: Name of the algorithm being played
        """
        self.config = config
        self.title = title

    @abstractmethod
    def start(self):
        """Start plotting."""
        pass

    @abstractmethod
    def clear(self):
        """Drop all recorded points (new input loaded)."""
        pass

    @abstractmethod
    def step(self, position: int, counts: Counter):
        """
        Record the cumulative step-kind counts at a cursor position.

        Args:
            position: Cursor position
            counts: Counts of step kinds in the applied prefix
        """
        pass

    @abstractmethod
    def finish(self):
        """Finish plotting."""
        pass


class MatplotlibPlotter(Plotter):
    """
    Matplotlib plotter of cumulative operation counts per cursor position.

    Moving the cursor backward truncates the recorded series, so the chart
    always describes the currently applied prefix.
    """

    def __init__(self, config, title: Optional[str] = None):
        super().__init__(config, title)
        self.fig = None
        self.ax = None
        self._lines: Dict[str, object] = {}
        self.positions = np.array([], dtype=np.int64)
        self.series: Dict[str, np.ndarray] = {name: np.array([], dtype=np.int64) for name in SERIES}

    def _initialize_plots(self):
        """Initialize matplotlib figure and axes."""
        matplotlib.use(self.config.plot_backend)
        import matplotlib.pyplot as plt

        self.fig, self.ax = plt.subplots(figsize=(8, 4.5))
        self.ax.set_title(f'{self.title or "Algorithm"}: cumulative operations')
        self.ax.set_xlabel('Step')
        self.ax.set_ylabel('Count')
        self.ax.grid(True, alpha=0.3)

        for name in SERIES:
            line, = self.ax.plot([], [], label=name, linewidth=1.5)
            self._lines[name] = line
        self.ax.legend(loc='upper left', fontsize=10)

    def start(self):
        """Start the plotter."""
        if self.fig is None:
            self._initialize_plots()

    def clear(self):
        self.positions = np.array([], dtype=np.int64)
        self.series = {name: np.array([], dtype=np.int64) for name in SERIES}
        self._update_plots()

    def step(self, position: int, counts: Counter):
        # Keep only points before this position
        keep = self.positions < position
        self.positions = np.append(self.positions[keep], position)
        for name, kinds in SERIES.items():
            total = sum(counts.get(kind, 0) for kind in kinds)
            self.series[name] = np.append(self.series[name][keep], total)
        self._update_plots()

    def totals(self) -> Dict[str, int]:
        """Latest value of each series."""
        return {name: int(values[-1]) if len(values) else 0 for name, values in self.series.items()}

    def points(self) -> List[Tuple[int, Dict[str, int]]]:
        """Recorded (position, totals) pairs."""
        return [
            (int(position), {name: int(values[i]) for name, values in self.series.items()})
            for i, position in enumerate(self.positions)
        ]

    def _update_plots(self):
        """Update lines incrementally using set_data()."""
        if self.fig is None:
            return
        for name, line in self._lines.items():
            line.set_data(self.positions, self.series[name])

        if len(self.positions):
            y_max = max(int(values.max()) for values in self.series.values())
            self.ax.set_xlim(0, max(1, int(self.positions.max())))
            self.ax.set_ylim(0, max(1, y_max) * 1.05)
        self.fig.canvas.draw_idle()

    def save(self, path: str):
        """Write the chart to an image file."""
        if self.fig is None:
            self._initialize_plots()
            self._update_plots()
        self.fig.savefig(path)

    def finish(self):
        """Finish plotting (keep the figure for saving)."""
        pass


def create_plotter(plotter_type: str, config, title: Optional[str] = None):
    """
    Factory function to create the appropriate plotter.

    Args:
        plotter_type: 'matplotlib'
        config: Configuration object
        title: Name of the algorithm being played

    Returns:
        Plotter instance
    """
    if plotter_type == 'matplotlib':
        return MatplotlibPlotter(config, title)
    else:
        raise ValueError(f"Unknown plotter type: {plotter_type}")
