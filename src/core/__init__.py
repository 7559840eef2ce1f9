"""Shared runtime layer.

This module holds errors, constants, configuration, logging, and the
set-once field checks used by every builder.
"""
