# main.py
import sys

from matchup_engine.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
