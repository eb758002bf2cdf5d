"""Interaction tracking -- logged touchpoints between staff and donors."""
