"""Pure domain pieces: outcomes, service descriptors, gateway URLs, file DTOs.

These modules do no I/O so they can be unit-tested on their own and reused
by every layer of the client.
"""
__all__ = ["outcomes", "services", "urls", "files"]
