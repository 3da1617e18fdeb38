"""
solid_pricing - Order Pricing Pipeline

A pure, synchronous pricing library: pluggable discount strategies, tax
calculators and shipping calculators composed by a price calculator that
depends only on their abstractions and returns an immutable breakdown.
"""

__version__ = "0.1.0"
__author__ = "solid_pricing Team"
