"""Compensation Service - employee salary records with atomic raises."""
