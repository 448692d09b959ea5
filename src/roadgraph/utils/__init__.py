"""Utility helpers for roadgraph."""
