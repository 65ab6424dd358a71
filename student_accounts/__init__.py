"""
Student Accounts

A single-balance account manager with exact Decimal arithmetic and
validated credit/debit operations, driven from a text menu or a small
REST API.
"""

__version__ = "1.0.0"
