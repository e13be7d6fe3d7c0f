"""Applet manifests, name derivation, field validation and a bundled catalogue."""

__version__ = "0.1.0"

__all__ = [
    "catalog_mn",
    "catalog_os",
    "catalog_st",
    "catalog_tw",
    "manifest",
    "validate",
]