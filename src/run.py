#!/usr/bin/env python3
"""
scorelink - Scoreboard Live Link

Launcher for running from a source checkout.
Equivalent to the installed `scorelink` command.
"""

import sys
from pathlib import Path

# Add scorelink package to path
sys.path.insert(0, str(Path(__file__).parent))

from scorelink.runner import main

if __name__ == "__main__":
    sys.exit(main())
