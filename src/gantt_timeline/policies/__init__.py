"""Critical chain policy implementations."""

from ..errors import UnknownPolicyError
from .base import CriticalChainPolicy
from .first_predecessor import FirstPredecessorPolicy
from .longest_path import LongestPathPolicy

POLICIES = {
    'first-predecessor': FirstPredecessorPolicy,
    'longest-path': LongestPathPolicy,
}


def get_policy(name: str, config: dict) -> CriticalChainPolicy:
    """Instantiate a policy by its config name."""
    try:
        return POLICIES[name.lower()](config)
    except KeyError:
        raise UnknownPolicyError(name) from None


__all__ = ['CriticalChainPolicy', 'FirstPredecessorPolicy', 'LongestPathPolicy', 'POLICIES', 'get_policy']
