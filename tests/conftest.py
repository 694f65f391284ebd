"""
Pytest configuration and shared fixtures for layout_measurement tests.

This module provides:
- src/ on sys.path and an offscreen Qt platform
- log files redirected to a temporary directory
- console, metrics and recording-view fixtures
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault(
    "LAYOUT_MEASUREMENT_LOG_DIR", tempfile.mkdtemp(prefix="layout-measurement-logs-")
)

from layout_measurement.core import (  # noqa: E402
    Console,
    Point,
    ProposedSize,
    Size,
    TextMetrics,
    View,
)


# =============================================================================
# Recording views
# =============================================================================


class FixedView(View):
    """Leaf that always reports the same size and records what it was asked."""

    def __init__(self, size: Size, priority: float = 0.0):
        super().__init__()
        self.size = size
        self.layout_priority = priority
        self.proposals: list[ProposedSize] = []
        self.placements: list[tuple[Point, ProposedSize]] = []

    def size_that_fits(self, proposal: ProposedSize) -> Size:
        self.proposals.append(proposal)
        return self.size

    def place_at(self, origin: Point, proposal: ProposedSize) -> None:
        self.placements.append((origin, proposal))
        super().place_at(origin, proposal)


class FlexibleView(View):
    """Leaf that takes the proposed width up to a maximum."""

    def __init__(self, max_width: float, height: float = 20.0, priority: float = 0.0):
        super().__init__()
        self.max_width = max_width
        self.height = height
        self.layout_priority = priority
        self.proposals: list[ProposedSize] = []

    def size_that_fits(self, proposal: ProposedSize) -> Size:
        self.proposals.append(proposal)
        width = self.max_width if proposal.width is None else min(proposal.width, self.max_width)
        return Size(width, self.height)


@pytest.fixture
def console():
    """A fresh console, isolated from the process-wide one."""
    return Console()


@pytest.fixture
def metrics():
    """Fixed-advance text metrics: 7pt per character, 16pt lines."""
    return TextMetrics(advance=7.0, line_height=16.0)


@pytest.fixture
def fixed_view_factory():
    def factory(width: float, height: float, priority: float = 0.0) -> FixedView:
        return FixedView(Size(width, height), priority)

    return factory


@pytest.fixture
def flexible_view_factory():
    def factory(max_width: float, height: float = 20.0, priority: float = 0.0):
        return FlexibleView(max_width, height, priority)

    return factory


@pytest.fixture(autouse=True)
def isolated_settings_file(tmp_path, monkeypatch):
    """Keep settings written by closing windows out of the user's config."""
    from layout_measurement.utils import settings

    config_dir = tmp_path / "config"
    monkeypatch.setattr(settings, "CONFIG_DIR", str(config_dir))
    monkeypatch.setattr(settings, "CONFIG_FILE", str(config_dir / "settings.json"))
    return config_dir / "settings.json"
