"""Application layer for EventNotify.

Services that own in-memory state (subscribers, listeners, streaming
connections, in-flight deliveries) and the ports they depend on.
"""
