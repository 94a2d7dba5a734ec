"""Ready-made stand-in backends."""
