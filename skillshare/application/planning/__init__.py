"""Planning context - Application layer."""
