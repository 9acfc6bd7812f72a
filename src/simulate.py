#!/usr/bin/env python3
"""
scorelink Simulation Mode

Quick launcher for testing without hardware or a dashboard.
Equivalent to: python run.py --simulate --no-socket --debug
"""

import sys
from pathlib import Path

# Add scorelink package to path
sys.path.insert(0, str(Path(__file__).parent))

# Import and run with simulation flags
sys.argv.extend(["--simulate", "--no-socket", "--debug"])

from scorelink.runner import main

if __name__ == "__main__":
    sys.exit(main())
