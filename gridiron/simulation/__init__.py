"""Schedule generation, game simulation and season orchestration."""

from gridiron.simulation.batch import BatchCoordinator
from gridiron.simulation.committer import CommitOutcome, LookupIndex, ResultCommitter
from gridiron.simulation.engine import GameSimulator
from gridiron.simulation.scheduling import ScheduleGenerator, fix_schedule_completely, validate_schedule
from gridiron.simulation.season import SeasonSimulator, WeekResult
from gridiron.simulation.worker import WorkerBridge, merge_delta

__all__ = [
    "BatchCoordinator",
    "CommitOutcome",
    "GameSimulator",
    "LookupIndex",
    "ResultCommitter",
    "ScheduleGenerator",
    "SeasonSimulator",
    "WeekResult",
    "WorkerBridge",
    "fix_schedule_completely",
    "merge_delta",
    "validate_schedule",
]
