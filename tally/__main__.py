"""
Entry point for running TALLY as a module.

Usage: python -m tally [command] [options]
"""
from .cli import main

if __name__ == "__main__":
    main()
