#!/usr/bin/env python3
"""
Search a Connect Four position or play against the engine.
You play as Red (R), the engine plays as Yellow (Y).
"""
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from connect4_engine.play import main

if __name__ == "__main__":
    sys.exit(main())
