"""Pydantic schemas: factors, calculator inputs/results, reports."""
