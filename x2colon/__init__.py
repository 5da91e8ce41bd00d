"""
x2-colon: sum the timestamp ranges of a script and strip them out of it.
"""

__version__ = "0.1.0"
