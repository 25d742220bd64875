"""Domain layer for EventNotify.

Pure data and rules: events, subscribers, notifications, channel renderers
and the exceptions raised when they are misused. Nothing here performs I/O.
"""
