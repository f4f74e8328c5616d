# partialize/analysis/__init__.py

"""
Analysis Package

Reports recurring element patterns as component suggestions.
"""

from .components import ComponentAnalyzer, ComponentSuggestion, analyze_components

__all__ = ["ComponentAnalyzer", "ComponentSuggestion", "analyze_components"]
