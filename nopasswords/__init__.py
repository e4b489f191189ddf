"""nopasswords - WiFi QR codes generated from a text prompt.

This package provides the submission and presentation layer over an
external image-generation backend: the generation form controller, the
results loader for shareable result pages, and the key-value store they
read from.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
