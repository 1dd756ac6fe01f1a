#!/usr/bin/env python3
"""
Launcher script for the Text Analyzer report
"""

import sys
import logging

from analyzer.report import main

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    if len(sys.argv) > 1:
        main(" ".join(sys.argv[1:]))
    else:
        main()
