#!/usr/bin/env python
"""
Wrapper to run the console demo with proper path setup
"""
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from bullion_cart.cli import main

main()
