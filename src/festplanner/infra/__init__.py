"""
Infrastructure layer - database, logging, settings, and technical concerns.

This layer contains infrastructure concerns like database access,
logging, configuration, and other technical implementations.
"""
