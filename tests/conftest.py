import os
import sys
from pathlib import Path

# Allow importing the modules from repository root
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
