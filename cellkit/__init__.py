"""
cellkit - themed widget layout for character-cell terminals.

See cellkit.ui for the public API.
"""

__version__ = "0.1.0"
