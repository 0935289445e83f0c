"""Certificate portal: NIT-scoped listing of tax certificates in object storage."""

__version__ = "0.1.0"
