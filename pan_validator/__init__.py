"""
PAN Validator — Rule-based validation for Indian PAN identifiers.

Architecture: Normalize → Deduplicate → Rule cascade → Summary
Philosophy:  One identifier, one verdict. The first broken rule wins.
"""

__version__ = "1.0.0"
