"""Object API: a small HTTP CRUD service over a single `objects` table."""
