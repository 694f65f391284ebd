"""
Layout Measurement - watch a layout pass negotiate sizes.

Wrap views in LogSizes tracers and the outermost one in ClearConsole; each
layout pass then leaves its propose/report sequence in the console.
"""

__version__ = "0.1.0"
