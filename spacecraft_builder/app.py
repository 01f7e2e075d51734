"""
Spacecraft Builder - application entry point.

Parses the command line, configures logging, applies the dark palette
and shows the main window.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

# Set before importing Qt; helps macOS rendering
os.environ.setdefault('QT_MAC_WANTS_LAYER', '1')

from PyQt5.QtWidgets import QApplication
from PyQt5.QtGui import QPalette, QColor
from PyQt5.QtCore import Qt

from spacecraft_builder import __version__
from spacecraft_builder.config import load_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spacecraft-builder",
        description="Grid editor for assembling spacecraft from components",
    )
    parser.add_argument("--load", metavar="FILE",
                        help="Structure snapshot (.json) to open on start")
    parser.add_argument("--config", metavar="FILE",
                        help="Editor settings file (default: ~/.config/spacecraft_builder/settings.json)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _dark_palette() -> QPalette:
    palette = QPalette()
    palette.setColor(QPalette.Window, QColor(43, 43, 43))
    palette.setColor(QPalette.WindowText, Qt.white)
    palette.setColor(QPalette.Base, QColor(35, 35, 35))
    palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    palette.setColor(QPalette.ToolTipBase, QColor(53, 53, 53))
    palette.setColor(QPalette.ToolTipText, QColor(224, 224, 224))
    palette.setColor(QPalette.Text, Qt.white)
    palette.setColor(QPalette.Button, QColor(53, 53, 53))
    palette.setColor(QPalette.ButtonText, Qt.white)
    palette.setColor(QPalette.BrightText, Qt.red)
    palette.setColor(QPalette.Highlight, QColor(33, 150, 243))
    palette.setColor(QPalette.HighlightedText, Qt.black)
    return palette


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    logger.info("Starting Spacecraft Builder %s", __version__)

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Spacecraft Builder")
    app.setApplicationDisplayName("Spacecraft Builder")
    app.setOrganizationName("SpacecraftBuilder")
    app.setStyle("Fusion")
    app.setPalette(_dark_palette())

    # Imported after QApplication exists
    from spacecraft_builder.ui.main_window import MainWindow

    window = MainWindow(config)
    window.show()

    if args.load:
        window.load_file(args.load)

    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
