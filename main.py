#!/usr/bin/env python3
"""
Main entry point for the tmi-events replay tool
"""

import sys

from tmi_events.cli import main

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
