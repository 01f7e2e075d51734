"""
Spacecraft Builder - UI Module

PyQt5 shell around the headless editor core.
"""

from .main_window import MainWindow

__all__ = [
    'MainWindow'
]
