"""Application layer: the call boundary used by presentation code."""
