"""
Bullion cart - shopping carts for unit-priced and weight-priced products.
"""

__version__ = "0.1.0"
