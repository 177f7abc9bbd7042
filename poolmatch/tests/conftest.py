import sys
from pathlib import Path

# Add the project root to sys.path so that the "poolmatch" package can be found
# structure: <root>/poolmatch/tests/conftest.py

current_dir = Path(__file__).parent.absolute()
root_dir = current_dir.parent.parent  # <root>
sys.path.insert(0, str(root_dir))
