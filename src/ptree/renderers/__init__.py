"""Glyph sets and the text renderer."""
