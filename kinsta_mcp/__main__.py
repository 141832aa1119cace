"""ABOUTME: Allows `python -m kinsta_mcp`."""

from .server import main

if __name__ == "__main__":
    main()
