"""Pygame front end: window, HUD and keyboard input."""
