"""
Recipe AI
=========

Free-text cooking request -> structured, illustrated recipes.
"""

from .pipeline import RecipePipeline, fetch_recipes, get_pipeline

__all__ = ["RecipePipeline", "fetch_recipes", "get_pipeline"]
