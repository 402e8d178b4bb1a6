"""Application layer: ports and use cases of the Discord sink."""
