"""
Spacecraft Builder - grid editor for assembling spacecraft from typed components.
"""

__version__ = "0.1.0"
