#!/usr/bin/env python
"""Run Arman Legal locally with reload and verbose console logs."""

import logging

from armanlegal import main

if __name__ in {"__main__", "__mp_main__"}:
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(name)s: %(message)s",
    )
    for noisy in ("watchfiles", "httpx", "httpcore", "anthropic", "markdown_it"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
    main()
