"""
Entry point for running missioncost as a module.

Usage:
    python -m missioncost study --input study.json
    python -m missioncost make-example
    python -m missioncost serve --port 8000
"""

import sys

from missioncost.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
