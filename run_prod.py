#!/usr/bin/env python
"""Run Arman Legal for deployment: reload off, INFO console logs."""

import os

os.environ["ARMANLEGAL_RELOAD"] = "0"

from armanlegal import main  # noqa: E402

if __name__ in {"__main__", "__mp_main__"}:
    main()
