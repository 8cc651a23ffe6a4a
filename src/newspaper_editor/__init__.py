"""Newspaper article editor core."""
