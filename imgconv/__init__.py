"""imgconv - convert images between raster formats from the command line.

    imgconv input.webp output.png
"""

__version__ = "0.1.0"
