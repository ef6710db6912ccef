"""Demo HTTP surface for the update engine."""
