"""
textbank - key based UI text resolution with persisted fallbacks
"""

__version__ = "0.1.0"
