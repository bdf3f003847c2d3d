"""Graph rendering for kglight."""
