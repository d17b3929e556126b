#!/usr/bin/env python3
"""
ContentGem Client Main Entry Point

This module serves as the console-script entry point for the package.
It provides a minimal delegator to the CLI module without import-time side effects.
"""

# Import CLI main function
from .cli import main


# Main entry point - delegates to CLI module
if __name__ == "__main__":
    main()
