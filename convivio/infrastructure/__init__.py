"""Infrastructure layer for Convivio: adapters, stubs and observability."""
