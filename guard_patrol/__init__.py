"""Guard patrol simulation: path tracing and loop-obstacle search on a character map."""
