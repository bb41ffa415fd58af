# Varshaphala Engine - Tools
from .varshaphala import generate_varshaphala
from .cache import ResultCache

__all__ = ["generate_varshaphala", "ResultCache"]
