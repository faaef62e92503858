"""
version.py — pwmeter
=====================
Single source of truth for the package version.
Used by:
  - pyproject.toml (dynamic version)
  - the command-line --version flag
"""

APP_NAME = "pwmeter"
VERSION  = "1.0.0"
