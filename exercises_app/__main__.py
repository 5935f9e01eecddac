"""
Launcher for 'python -m exercises_app'.
"""

from exercises_app.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
