# Creational Patterns
# Abstract Factory, Builder and Factory Method demos

"""
Small, independent demo programs for the creational design patterns.

Each subpackage recreates the same shape: abstract product interfaces,
concrete variants, and a creation authority (factory or builder) that
hides which variant the caller receives.
"""

__version__ = "0.1.0"
