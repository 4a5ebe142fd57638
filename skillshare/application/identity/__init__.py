"""Identity context - Application layer."""
