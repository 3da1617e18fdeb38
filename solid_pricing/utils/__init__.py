"""
Utility functions module.

Decimal money helpers shared by the strategies and the price calculator.
Amounts are kept at full precision during a calculation and rounded only
when displayed or serialized.
"""
