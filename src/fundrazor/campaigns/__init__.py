"""Fundraising campaigns -- model, schemas, repository and service.

Campaigns carry a goal and running totals (raised, donor count, gifts) and
move through planning -> active -> completed, with paused as a side state.
"""
