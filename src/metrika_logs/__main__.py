"""
Metrika Logs CLI entry point.

Usage:
    python -m metrika_logs counters
    python -m metrika_logs export --date1 2024-01-01 --date2 2024-01-31 --dest ./exports
"""

from metrika_logs.cli import main

if __name__ == "__main__":
    main()
