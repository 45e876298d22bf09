# conftest.py
from pathlib import Path
import sys

# The server modules import each other as top-level modules (`from database import ...`),
# and the client does the same from app/.
ROOT = Path(__file__).resolve().parent
SERVER = str(ROOT / "server")
CLIENT = str(ROOT / "app")
if SERVER not in sys.path:
    sys.path.insert(0, SERVER)
if CLIENT not in sys.path:
    sys.path.append(CLIENT)
