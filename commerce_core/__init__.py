"""
Commerce Core - Users and Orders Behind Small Service Interfaces

This package contains:
1. Domain records (users, orders) and the order status machine
2. An in-memory record store serialised by a single lock
3. User and order services that validate input and delegate to the store

Failures surface as sentinels (-1, False, None), never as exceptions.
"""

__version__ = "0.1.0"
