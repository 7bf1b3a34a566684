"""
Shared helpers for the command-line entry points.
"""
