"""Declarative tap layer.

This package reads YAML tap declarations into tap builders so that
pipelines can keep table access next to their job configuration.
"""
