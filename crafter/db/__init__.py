"""Wizard state persistence."""
