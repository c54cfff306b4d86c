#!/usr/bin/env python3
"""
nanoKONTROL2 monitor - Entry point.

Prints typed events decoded from a Korg nanoKONTROL2.
"""

from nano_kontrol2.cli import main

if __name__ == "__main__":
    main()
