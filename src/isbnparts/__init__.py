"""Parse, validate and hyphenate ISBNs."""
