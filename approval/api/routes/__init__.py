"""Route modules - one router per resource, all under /api/v1."""
