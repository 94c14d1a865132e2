"""
Storage layer: SQLAlchemy schema and database management.
"""
