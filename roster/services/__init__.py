"""Business logic for accounts, sessions and user pages."""
