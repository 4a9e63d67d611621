"""Recipe domain ports."""

from .key_factory import KeyFactory, KeyPair
from .route_translator import RouteTranslator

__all__ = ["KeyFactory", "KeyPair", "RouteTranslator"]
