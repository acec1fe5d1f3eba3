"""Google REST API transport, listing clients and models."""
