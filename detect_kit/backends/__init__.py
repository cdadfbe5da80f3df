"""
Inference runtimes for detect_kit.

Kept apart from the core so preprocessing, decoding and pin placement import
without an inference runtime installed.
"""

from __future__ import annotations

__all__ = []
