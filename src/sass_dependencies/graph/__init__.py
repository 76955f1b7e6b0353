"""Import graph built while resolving a stylesheet."""
