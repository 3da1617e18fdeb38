"""
Configuration module.

Defaults, YAML loading with layered precedence, validation, and assembly of
a price calculator from a configuration mapping.
"""
