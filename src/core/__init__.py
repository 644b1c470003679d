"""Shared constants, errors, logging and typed models."""
