"""Legislation text sources."""
