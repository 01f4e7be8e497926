"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the town graph to external systems like road files.
"""
