"""Roster: multi-user web app with session auth, profiles, a user directory and admins."""
