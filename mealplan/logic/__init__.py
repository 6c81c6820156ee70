"""Core business logic layer.

Subpackages:
- parsing: weekly menu spreadsheet inference (dates, meal columns, menu text, week key)

Storage and HTTP plumbing live in 'infra' and 'api'; nothing here does I/O
beyond reading the uploaded workbook through infra.sheet_loader.
"""
__all__ = ["parsing"]
