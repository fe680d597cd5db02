"""Pygame framer drawing array and graph applier snapshots."""

import math
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pygame

# Keyboard bindings: key -> command name
KEY_COMMANDS = {
    pygame.K_SPACE: "toggle",
    pygame.K_RIGHT: "step_forward",
    pygame.K_LEFT: "step_backward",
    pygame.K_UP: "faster",
    pygame.K_DOWN: "slower",
    pygame.K_HOME: "rewind",
    pygame.K_END: "jump_to_end",
    pygame.K_r: "reset",
    pygame.K_ESCAPE: "quit",
    pygame.K_q: "quit",
}

# Highest priority first; a slot takes the color of its first matching class
ARRAY_CLASS_PRIORITY = ("found", "swapping", "comparing", "pivot", "minimum", "active", "sorted", "window", "faded")
NODE_CLASS_PRIORITY = ("current", "visited", "in-tree", "stacked", "queued", "start")
EDGE_CLASS_PRIORITY = ("considered", "selected", "tree", "rejected", "removed")


def find_view(snapshot: Dict[str, Any], key: str) -> Optional[Dict[str, Any]]:
    """Return the (possibly nested composite) snapshot that carries `key`."""
    if key in snapshot:
        return snapshot
    for value in snapshot.values():
        if isinstance(value, dict) and key in value:
            return value
    return None


def circular_layout(count: int, center: Tuple[int, int], radius: float) -> np.ndarray:
    """Screen positions of `count` nodes evenly spaced on a circle, first node on top."""
    angles = -np.pi / 2 + 2 * np.pi * np.arange(count) / max(count, 1)
    return np.column_stack((center[0] + radius * np.cos(angles),
                            center[1] + radius * np.sin(angles)))


class PygameFramer:
    """Pygame framer rendering one playback frame at a time."""

    def __init__(self, window_size: Tuple[int, int] = (960, 540), caption: str = "AlgoPlay"):
        """
        Initialize framer.

        Args:
            window_size: Window size in pixels
            caption: Window title
        """
        self.window_size = window_size
        self.caption = caption
        self.screen = None

        # Colors
        self.colors = {
            'background': (20, 20, 30),
            'bar': (100, 150, 255),
            'node': (70, 80, 110),
            'edge': (90, 90, 110),
            'text': (255, 255, 255),
            'dim_text': (150, 150, 150),
            'found': (100, 255, 100),
            'sorted': (80, 200, 120),
            'swapping': (255, 100, 100),
            'comparing': (255, 200, 80),
            'pivot': (220, 120, 255),
            'minimum': (255, 150, 200),
            'active': (120, 220, 255),
            'window': (140, 170, 240),
            'faded': (50, 55, 70),
            'current': (255, 200, 80),
            'visited': (80, 200, 120),
            'in-tree': (80, 200, 120),
            'stacked': (140, 120, 255),
            'queued': (120, 220, 255),
            'start': (255, 150, 200),
            'considered': (255, 200, 80),
            'selected': (100, 255, 100),
            'tree': (80, 200, 120),
            'rejected': (255, 100, 100),
            'removed': (50, 55, 70),
        }

    @property
    def running(self) -> bool:
        return self.screen is not None

    def _class_color(self, classes: List[str], priority: Tuple[str, ...], default: str):
        for name in priority:
            if name in classes:
                return self.colors[name]
        return self.colors[default]

    def _draw_text(self, text: str, pos: tuple, font=None, color=None):
        """Draw text on screen."""
        if font is None:
            font = self.font
        if color is None:
            color = self.colors['text']
        text_surface = font.render(text, True, color)
        self.screen.blit(text_surface, pos)

    def _draw_bars(self, view: Dict[str, Any], area: pygame.Rect):
        """Draw array values as vertical bars."""
        values = np.asarray(view["values"], dtype=float)
        if len(values) == 0:
            return
        scale = np.abs(values).max() or 1.0
        heights = (np.abs(values) / scale * (area.height - 30)).astype(int)
        slot = area.width / len(values)
        bar_width = max(2, int(slot * 0.8))

        for index, (value, height) in enumerate(zip(values, heights)):
            color = self._class_color(view["classes"][index], ARRAY_CLASS_PRIORITY, 'bar')
            x = int(area.left + index * slot + (slot - bar_width) / 2)
            y = area.bottom - 20 - height
            pygame.draw.rect(self.screen, color, (x, y, bar_width, max(height, 2)))
            label = f"{value:g}"
            self._draw_text(label, (x, area.bottom - 16), self.small_font, self.colors['dim_text'])

        # Pointer labels under their slots
        for name, index in view.get("pointers", {}).items():
            if 0 <= index < len(values):
                x = int(area.left + index * slot + slot / 2) - 8
                self._draw_text(name, (x, area.bottom + 2), self.small_font, self.colors['comparing'])

        buckets = view.get("buckets") or []
        if buckets:
            text = "  ".join(f"{digit}:{list(bucket)}" for digit, bucket in enumerate(buckets) if bucket)
            self._draw_text(f"Buckets  {text}", (area.left, area.top), self.small_font)
        if view.get("window_sum") is not None:
            self._draw_text(f"Window sum: {view['window_sum']:g}", (area.left, area.top), self.small_font)

    def _draw_graph(self, view: Dict[str, Any], area: pygame.Rect):
        """Draw nodes on a circle with edges between them."""
        nodes = list(view["nodes"])
        if not nodes:
            return
        center = area.center
        radius = min(area.width, area.height) / 2 - 30
        positions = {node: tuple(pos.astype(int))
                     for node, pos in zip(nodes, circular_layout(len(nodes), center, radius))}

        edge_ends = view.get("edge_ends", {})
        for key, classes in view["edges"].items():
            if key not in edge_ends:
                continue
            u, v, directed = edge_ends[key]
            start, end = np.array(positions[u]), np.array(positions[v])
            color = self._class_color(classes, EDGE_CLASS_PRIORITY, 'edge')
            width = 4 if classes else 2
            pygame.draw.line(self.screen, color, tuple(start), tuple(end), width)
            if directed:
                direction = (end - start) / max(np.linalg.norm(end - start), 1.0)
                tip = end - direction * 18
                normal = np.array([-direction[1], direction[0]])
                points = [tuple(tip), tuple(tip - direction * 10 + normal * 6), tuple(tip - direction * 10 - normal * 6)]
                pygame.draw.polygon(self.screen, color, points)

        for node in nodes:
            color = self._class_color(view["nodes"][node], NODE_CLASS_PRIORITY, 'node')
            pygame.draw.circle(self.screen, color, positions[node], 16)
            pygame.draw.circle(self.screen, (255, 255, 255), positions[node], 16, 2)
            label = self.font.render(str(node), True, self.colors['text'])
            self.screen.blit(label, label.get_rect(center=positions[node]))

        lines = [f"Order: {' '.join(view['order'])}"]
        if view.get("total") is not None:
            lines.append(f"Total weight: {view['total']:g}")
        if view.get("indegree"):
            lines.append("In-degree: " + " ".join(f"{n}={d}" for n, d in view["indegree"].items()))
        if view.get("cycle"):
            lines.append("Cycle detected")
        for offset, line in enumerate(lines):
            self._draw_text(line, (area.left, area.top + offset * 18), self.small_font)

    def render_frame(self, frame: Dict[str, Any]):
        """
        Draw one frame.

        Args:
            frame: Dict with 'snapshot', 'title', 'status', 'progress', 'state' and 'speed_ms'
        """
        if self.screen is None:
            return

        self.screen.fill(self.colors['background'])
        width, height = self.window_size
        area = pygame.Rect(20, 70, width - 40, height - 130)

        snapshot = frame.get("snapshot") or {}
        array_view = find_view(snapshot, "values")
        graph_view = find_view(snapshot, "nodes")
        if array_view is not None:
            self._draw_bars(array_view, area)
        elif graph_view is not None:
            self._draw_graph(graph_view, area)

        # Header
        self._draw_text(frame.get("title", ""), (20, 10))
        self._draw_text(frame.get("status", ""), (20, 38), self.small_font)
        self._draw_text(f"{frame.get('progress', '0/0')}  {frame.get('state', '')}  {frame.get('speed_ms', 0):.0f} ms",
                        (width - 260, 10), self.small_font)

        # Controls
        self._draw_text("SPACE: Play/Pause  LEFT/RIGHT: Step  UP/DOWN: Speed  HOME/END: Rewind/End  R: Reset  ESC/Q: Quit",
                        (20, height - 24), self.small_font, self.colors['dim_text'])

        pygame.display.flip()

    def poll_commands(self) -> List[str]:
        """Translate pending pygame events into command names."""
        if self.screen is None:
            return []
        commands = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                commands.append("quit")
            elif event.type == pygame.KEYDOWN and event.key in KEY_COMMANDS:
                commands.append(KEY_COMMANDS[event.key])
        return commands

    def start(self):
        # Initialize Pygame
        pygame.init()
        self.screen = pygame.display.set_mode(self.window_size)
        pygame.display.set_caption(self.caption)
        # Font
        self.font = pygame.font.Font(None, 24)
        self.small_font = pygame.font.Font(None, 18)

    def finish(self):
        """Close the window."""
        self.screen = None
        pygame.quit()
