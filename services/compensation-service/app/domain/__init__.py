"""
Domain layer - Core business logic and entities.

Contains pure business logic independent of frameworks and infrastructure.
"""
