"""Demo data for Vecino.

This package holds the fixed dataset the API serves while the database
is unreachable, and the demo records that ``vecino db seed`` (or
``POST /api/seed``) writes into a real database.

Usage:
    vecino db seed
"""

__version__ = "0.1.0"
