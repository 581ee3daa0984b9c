"""Application layer: ports the API and scaffolder depend on."""
