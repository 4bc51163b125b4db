"""Shift Management package.

Feature modules (shifts, wages, payroll, coverage) follow the same layering:
frozen dataclass models, Protocol repositories with MySQL implementations,
services, and a thin Flask controller layer.
"""
