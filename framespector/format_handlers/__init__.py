# framespector/format_handlers/__init__.py
# !/usr/bin/env python3

"""
This package contains the frame scanners for the supported audio formats.
Each submodule (e.g., mp3/mp3.py) handles the scanning logic for a specific format,
and base.py defines the scanner interface and the diagnostic log sinks.
"""
