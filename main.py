#!/usr/bin/env python3
"""FocusDash — entry point.

Run with:
    python main.py
    python -m focusdash
"""

from focusdash.__main__ import main


if __name__ == "__main__":
    main()
