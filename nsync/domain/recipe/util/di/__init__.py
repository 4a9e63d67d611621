from .provider import RecipeProvider

__all__ = ["RecipeProvider"]
