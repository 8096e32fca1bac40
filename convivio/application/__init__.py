"""Application layer for Convivio: ports, services and DTOs."""
