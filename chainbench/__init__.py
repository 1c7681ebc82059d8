"""Supply chain benchmark check models, validation, running and reporting."""

__version__ = "0.1.0"
__all__ = ["__version__"]