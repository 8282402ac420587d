"""Root conftest: put this checkout's src/ first on sys.path.

Lets the suite run straight from a clone, and keeps an older installed
copy of styledtext_mcp from shadowing the sources under test.
"""

import pathlib
import sys

_src = str(pathlib.Path(__file__).resolve().parent / "src")
if _src not in sys.path:
    sys.path.insert(0, _src)
