"""Test environment: in-memory SQLite and cheap bcrypt, set before roster is imported."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
