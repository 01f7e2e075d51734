#!/usr/bin/env python3
"""
Spacecraft Builder - Main Application Entry Point

Runs the editor from a source checkout. Installed copies use the
`spacecraft-builder` console script instead.
"""

import sys

from spacecraft_builder.app import main

if __name__ == "__main__":
    sys.exit(main())
