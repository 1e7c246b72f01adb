"""Host adapters that feed editor text and selections into the bootstrap."""
