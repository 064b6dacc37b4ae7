"""
Domain Layer - Records and Business Rules

This layer contains:
- Records (User, Order) and the order status enum
- Validation rules for new users and orders
- The rejection taxonomy used inside the services

Key principle: ZERO dependencies on infrastructure.
"""
