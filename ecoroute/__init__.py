"""Top-level package for the EcoRoute project.

EcoRoute asks a maps-grounded Gemini model for an energy-efficient
route between two places and normalizes its answer and place
citations for display.
"""
