"""
Entry point for running homebrain as a module.

Usage: python -m homebrain
"""

from homebrain.cli import main

if __name__ == "__main__":
    main()
