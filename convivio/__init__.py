"""
Convivio - Convivial Event Coordination Core

The dinner-planning core of the Convivio wine cellar application:
a dinner lifecycle state machine, a collaborative proposal and voting
ledger gated by participant roles, and a wine temperature-service
scheduler that turns confirmed wines into cancelable reminders.

Persistence, menu generation and notification delivery are external
collaborators reached through the ports in ``convivio.application.ports``.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
