"""Shared core layer.

This package holds constants, errors, typed models, runtime config,
and logging setup used by the query layer.
"""
