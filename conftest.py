"""
Root conftest.py for pytest configuration
"""

import sys
from pathlib import Path

# Get absolute paths
PROJECT_ROOT = Path(__file__).parent.absolute()
SRC_PATH = PROJECT_ROOT / "src"

# Make the source tree and the tests.helpers package importable without an install
sys.path.insert(0, str(SRC_PATH))
sys.path.insert(0, str(PROJECT_ROOT))
