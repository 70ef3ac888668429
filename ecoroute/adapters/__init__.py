"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems:
- Generative model (Gemini with Google Maps grounding)
- Device position (configuration, denied)
- Answer rendering (HTML)
"""
