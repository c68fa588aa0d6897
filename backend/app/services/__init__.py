"""Services Layer — data access over the user table."""
