"""
AI Services Command-Line Tools

Bootstrap and validation utilities for AI services infrastructure.
"""

__version__ = "0.1.0"
