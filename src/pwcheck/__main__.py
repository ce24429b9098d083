#!/usr/bin/env python3
"""
Allow running pwcheck as a module: python -m pwcheck
"""

from pwcheck.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
