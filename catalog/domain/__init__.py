"""Persistence-agnostic domain models and repository contracts."""
