# main.py
import sys

from delivery_nav.cli import main

if __name__ == "__main__":
    sys.exit(main())
