"""
Repository layer - Data access abstractions.

Compensation records are reached only through ``ICompensationRepository``;
the Postgres and in-memory implementations are interchangeable.
"""
