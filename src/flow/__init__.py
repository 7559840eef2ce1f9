"""Column and tap specification layer.

This package models column names, schema, paging, filter and time-range
selections, and the builders that assemble them into tap specifications.
"""
