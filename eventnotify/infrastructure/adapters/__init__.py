"""Concrete implementations of application ports."""

from eventnotify.infrastructure.adapters.system_time_authority import SystemTimeAuthority

__all__: list[str] = ["SystemTimeAuthority"]
