"""Query evaluation layer.

This package holds the operator registry, criterion matching, sorting,
windowing, and the fluent builder that composes them into one pipeline.
"""
