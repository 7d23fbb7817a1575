"""Reference documentation generator for exception class hierarchies."""

from .errors import ErrDocError
from .generator import GenerationResult, ReferenceGenerator

__all__ = ["ErrDocError", "GenerationResult", "ReferenceGenerator"]

__version__ = "0.1.0"
