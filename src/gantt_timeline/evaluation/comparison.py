"""Side-by-side comparison of critical chain policies."""

from typing import Dict, List, Optional, Sequence

from ..models.layout import ChainResult
from ..models.task import Task
from ..policies.base import CriticalChainPolicy
from ..policies.first_predecessor import FirstPredecessorPolicy
from ..policies.longest_path import LongestPathPolicy


class ChainComparison:
    """Membership differences between two chain results."""

    def __init__(self, baseline: ChainResult, candidate: ChainResult):
        self.baseline = baseline
        self.candidate = candidate
        self.both = sorted(baseline.task_ids & candidate.task_ids)
        self.only_baseline = sorted(baseline.task_ids - candidate.task_ids)
        self.only_candidate = sorted(candidate.task_ids - baseline.task_ids)

    @property
    def agrees(self) -> bool:
        return not self.only_baseline and not self.only_candidate

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON export."""
        return {
            'baseline_policy': self.baseline.policy_name,
            'candidate_policy': self.candidate.policy_name,
            'agrees': self.agrees,
            'both': self.both,
            'only_baseline': self.only_baseline,
            'only_candidate': self.only_candidate,
            'baseline_chain': list(self.baseline.ordered_ids),
            'candidate_chain': list(self.candidate.ordered_ids),
        }

    def to_human_readable(self) -> str:
        """Render the comparison as a small table."""
        lines = [
            "=" * 70,
            "CRITICAL CHAIN COMPARISON",
            "=" * 70,
            f"{'Policy':<25} {'Chain'}",
            "-" * 70,
            f"{self.baseline.policy_name:<25} {' -> '.join(self.baseline.ordered_ids) or '(empty)'}",
            f"{self.candidate.policy_name:<25} {' -> '.join(self.candidate.ordered_ids) or '(empty)'}",
            "",
            f"In both: {', '.join(self.both) or '-'}",
            f"Only {self.baseline.policy_name}: {', '.join(self.only_baseline) or '-'}",
            f"Only {self.candidate.policy_name}: {', '.join(self.only_candidate) or '-'}",
            "=" * 70,
        ]
        return "\n".join(lines)


def compare_policies(
    tasks: Sequence[Task],
    config: Optional[dict] = None,
    baseline: Optional[CriticalChainPolicy] = None,
    candidate: Optional[CriticalChainPolicy] = None,
) -> ChainComparison:
    """Run both policies on the same filtered task set."""
    config = config or {}
    baseline = baseline or FirstPredecessorPolicy(config)
    candidate = candidate or LongestPathPolicy(config)
    return ChainComparison(baseline.compute_chain(tasks), candidate.compute_chain(tasks))


def compare_projects(
    tasks: Sequence[Task],
    project_ids: List[str],
    config: Optional[dict] = None,
) -> Dict[str, ChainComparison]:
    """Compare policies for each project separately."""
    return {
        project_id: compare_policies([t for t in tasks if t.project_id == project_id], config)
        for project_id in project_ids
    }
