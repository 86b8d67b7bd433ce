"""
                Pizza Delivery API

A small in-memory order-tracking service for a pizza shop:
health check, order submission and lookup, and a static menu.

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
