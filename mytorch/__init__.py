"""A small feed-forward neural network for classifying chess positions."""

__version__ = "0.1.0"
__all__ = ["__version__"]