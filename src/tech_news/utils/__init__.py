"""Utility helpers for Tech News."""
