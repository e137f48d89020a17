"""Application layer: ports, engines and use cases."""
