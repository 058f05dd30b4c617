"""Chat room REST backend."""
