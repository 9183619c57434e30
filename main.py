#!/usr/bin/env python3
"""
ABOUTME: Entry point for the envp CLI
ABOUTME: Simple wrapper that imports and runs the modular CLI
"""

from envp.cli import main

if __name__ == "__main__":
    main()
