"""
`pulumi up` runs `cosmos-webapp/__main__.py` with only `cosmos-webapp/` on
the module search path. The shared `modules/` and `utils/` packages live one
level up, at the repository root, so that root is appended here.

CI exports `PYTHONPATH=<repo root>` and skips this.
"""

import os
import sys
from pathlib import Path

REPO_ROOT = str(Path(__file__).resolve().parent.parent)

if os.environ.get("CI") != "true" and REPO_ROOT not in sys.path:
    sys.path.append(REPO_ROOT)
