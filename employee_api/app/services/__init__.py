"""
Service layer.

Services encapsulate the business rules for a domain and sit between
the API handlers and the repositories.
"""
