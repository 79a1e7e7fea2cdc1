# ProblemLog
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Entry point for ``python -m problemlog``."""

from __future__ import annotations

import sys

from problemlog.cli import main

if __name__ == "__main__":  # pragma: no cover - import guard
    sys.exit(main(sys.argv[1:]))
