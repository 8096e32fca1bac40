"""Domain layer for Convivio.

Pure models, state machines and domain services. Nothing in this package
performs I/O; external effects live behind the application ports.
"""
