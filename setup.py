#!/usr/bin/env python3
"""
Cross-platform setup for LogScope
Simple pip-based installation that works with conda environments
"""

from setuptools import setup

# This setup.py is kept for compatibility but pyproject.toml handles the configuration
# All configuration is now in pyproject.toml
setup()
