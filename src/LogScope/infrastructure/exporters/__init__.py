# -*- coding: utf-8 -*-
"""
Exporters Submodule for LogScope Infrastructure.

Contains classes that capture chart windows and write them to image files or
the clipboard.
"""

from .image_exporter import ImageExporter, image_format_for_filter

__all__ = [
    "ImageExporter",
    "image_format_for_filter",
]
