"""Business logic for accounts, reports, profiles and image storage."""
