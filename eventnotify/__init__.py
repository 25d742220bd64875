"""
EventNotify - Real-time Notification Fan-out Service

Clients subscribe to a delivery channel (email, sms, push), domain events are
published against the service, and every subscriber's rendered notification is
pushed to open Server-Sent Events connections with its latency recorded.

All state is held in process memory and is lost on restart.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
