"""Diagnostics package.

Optional tools; install with:
  pip install "julianperiod[diagnostics]"
"""

__all__ = ["round_trip", "cycle_plot"]
