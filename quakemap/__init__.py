"""Earthquake map markers: classification, coloring and label placement."""
