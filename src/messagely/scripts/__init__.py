"""Maintenance scripts for the messagely database."""
