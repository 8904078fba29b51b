#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Internal helpers shared by the renderer, the highlighter and the image resolver."""
