"""
Cross-cutting infrastructure: settings, logging, database access and
shared exceptions.
"""
