"""Graphical form for Dice Collection."""
