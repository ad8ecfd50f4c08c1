"""Configuration, database and logging setup."""
