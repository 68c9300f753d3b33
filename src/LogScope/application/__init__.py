# -*- coding: utf-8 -*-
"""
Application Layer for LogScope.

Contains the graphical user interface and the logic that orchestrates user
interactions with the core domain and infrastructure layers.
"""
__all__ = []
