# main.py
import sys

from wod_planner.routines.cli import main

if __name__ == '__main__':
    sys.exit(main())
