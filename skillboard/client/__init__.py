from .api_client import SkillBoardClient
from .query_coordinator import CoordinatorState, Debouncer, QueryCoordinator, filter_aggregates
from .saved_skills import SavedSkillsCache, SavedSkillsStore

__all__ = [
    "SkillBoardClient",
    "CoordinatorState",
    "Debouncer",
    "QueryCoordinator",
    "filter_aggregates",
    "SavedSkillsCache",
    "SavedSkillsStore",
]
