"""
Services Package for imgconv.

This package contains the steps of the conversion pipeline:

- **Argument Resolver (`argument_resolver.py`):**
  Merges positional arguments and flags into a validated `ConversionJob`,
  inferring the output format from `--format`, `--extension` or the output
  file extension.

- **Conversion Service (`conversion_service.py`):**
  Hands the job to Pillow for decoding and encoding and reports the result.

- **Clipboard Service (`clipboard_service.py`):**
  Provides the source image when converting straight from the clipboard.
"""
