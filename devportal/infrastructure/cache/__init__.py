"""Cache: single-slot TTL holders owned by the clients that fill them."""

from devportal.infrastructure.cache.ttl_slot import TTLSlot

__all__ = ["TTLSlot"]
