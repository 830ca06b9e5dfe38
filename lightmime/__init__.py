"""Building blocks for MIME messages: addresses, headers, base64 and boundaries."""

__version__ = "0.1.0"
__all__ = ["address", "header", "base64codec", "boundary"]