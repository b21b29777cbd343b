"""
Entry Point Script (Bootstrap)
==============================
Starts the calculator from a source checkout without installing it.

It prepends 'src' to 'sys.path' so that 'import pocketcalc' resolves.

Usage:
    $ python run.py [--debug]
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

appid = 'pocketcalc.Calculator'  # Taskbar grouping on Windows
try:
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(appid)
except (AttributeError, ImportError):
    # Not on Windows
    pass

from pocketcalc.main import main

if __name__ == "__main__":
    sys.exit(main())
