"""Synthetic schedules and policy comparison."""

from .generator import TaskGenerator
from .comparison import ChainComparison, compare_policies, compare_projects

__all__ = ['TaskGenerator', 'ChainComparison', 'compare_policies', 'compare_projects']
