"""Database Infrastructure — SQLAlchemy Base shared by the ORM models.

Invariants:
    - Table metadata lives on Base; the schema itself is owned by the database

Design Decisions:
    - No migrations here: the donors table is provisioned outside this service
"""
