"""
Multifinance Credit Service

A FastAPI-based service for customer onboarding, per-tenor credit limit
administration and partner transactions that never overspend a limit.
"""

__version__ = "0.1.0"
