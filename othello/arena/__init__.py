"""
Arena module for running matches and tournaments between strategies.
"""
from .arena import Arena, ELORatingSystem

__all__ = ['Arena', 'ELORatingSystem']
