"""Bootcamp project showcase and voting API."""
