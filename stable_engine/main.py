#!/usr/bin/env python3
"""
Stable-token engine
Entry point for ``python -m stable_engine.main``
"""
from .cli import main

if __name__ == "__main__":
    main()
