"""Terminal game with Transformers robots and a vault of fusible energon crystals."""

__version__ = "0.1.0"