"""
Main module entry point.

Runs the HTTP server: python -m foulwatch.main
"""

from .server import main

if __name__ == "__main__":
    main()
