"""
OilSync: booking backend for an at-home oil change service.
"""
__version__ = "1.0.0"
