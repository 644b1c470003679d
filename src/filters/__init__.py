"""Spatem filtering layer.

This module decides whether spatem records pass configured
acceptance criteria.
"""
