# -*- coding: utf-8 -*-
"""
Infrastructure Layer for LogScope.

Handles interactions with external systems: reading CSV logs from the file
system and writing captured chart images.
"""

# Import specific readers/exporters directly from their subpackages.
__all__ = []
