"""
BOM Trend App - Hardware Module Price Inflation Engine

Decomposes the retail price history of single-board computers and compute
modules into memory, storage and residual cost contributions, and projects
future prices under adjustable monthly inflation assumptions.
"""

__version__ = "0.1.0"
__author__ = "BOM Trend Team"
