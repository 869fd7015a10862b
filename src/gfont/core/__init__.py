"""Workflow orchestration for gfont.

Key classes:
- FontFaceToolkit: Runs download, parse, load, merge, query and render steps
  with structured logging and run statistics
"""

from gfont.core.toolkit import FontFaceToolkit

__all__ = ["FontFaceToolkit"]
