"""Utility helpers shared by the parser, renderers and command-line front end."""
