"""Shared helpers for resloc."""
