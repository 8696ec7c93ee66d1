"""lockwords - find dictionary words a letter-wheel combination lock can spell"""

__version__ = "0.1.0"
