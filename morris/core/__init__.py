"""Board topology, state and rules."""
