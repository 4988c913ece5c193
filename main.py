#!/usr/bin/env python3
"""
gridpath - Main Entry Point
Shortest four-connected paths on obstacle grids
"""

import sys
from pathlib import Path

# Add the package directory to Python path
package_dir = Path(__file__).parent
if str(package_dir) not in sys.path:
    sys.path.insert(0, str(package_dir))

from gridpath.presentation.cli import main


if __name__ == '__main__':
    sys.exit(main())
