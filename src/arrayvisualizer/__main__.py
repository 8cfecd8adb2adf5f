"""Command-line entry point: python -m arrayvisualizer"""
import sys

from arrayvisualizer.app.main import main

if __name__ == "__main__":
    sys.exit(main())
