"""
Utilities Package for imgconv.

Modules:
    - format_utils.py: Helper functions for human-readable file sizes and for
      adjusting file extensions to match an output format.
"""
