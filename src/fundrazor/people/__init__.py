"""Donor records (persons) and their pipeline opportunities."""
