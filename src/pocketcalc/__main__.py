"""Run with: python -m pocketcalc"""
import sys

from pocketcalc.main import main

if __name__ == "__main__":
    sys.exit(main())
