#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers used by mdmanifest.

The package is imported lazily by ``mdmanifest.api`` so that a missing
mistune installation surfaces as a ``DependencyError`` at render time.
"""
