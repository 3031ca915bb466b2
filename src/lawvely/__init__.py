"""Lawvely: plain-language legislation summaries."""
