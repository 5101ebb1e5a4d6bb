#!/usr/bin/env python3
"""
Source-tree runner for the jyrolint CLI
"""

import sys
import os

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from jyrolint.cli.main import cli

if __name__ == "__main__":
    # If no arguments, show help
    if len(sys.argv) == 1:
        sys.argv.append('--help')

    # Support shorthand: main.py file.jyro → main.py check file.jyro
    if len(sys.argv) >= 2 and all(arg.endswith('.jyro') for arg in sys.argv[1:]):
        sys.argv.insert(1, 'check')

    cli()
