"""Staff users, password auth and JWT token issuance."""
