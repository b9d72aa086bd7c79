#!/usr/bin/env python
"""
Wrapper to run the Streamlit cart page with proper path setup
"""
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

# Now run streamlit
from streamlit.web import cli as stcli

sys.argv = ["streamlit", "run", str(Path(__file__).parent / "src" / "bullion_cart" / "ui" / "app.py")]
sys.exit(stcli.main())
