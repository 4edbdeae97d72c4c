"""
Configuration Package for imgconv.

This package centralizes the static configuration of the application, keeping
it apart from the conversion logic so that constants can be adjusted without
touching the code that uses them.

This package includes settings for:
- Quality bounds, command-line defaults and logger formats (`common.py`),
  including the optional user config file.
- The table of supported image formats and their file extensions (`formats.py`).
"""
