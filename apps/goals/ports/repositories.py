# apps/goals/ports/repositories.py
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from apps.goals.domain.entities import GoalEntity, GoalKind


class IGoalRepository(ABC):
    @abstractmethod
    def create(self, goal: GoalEntity) -> GoalEntity:
        """Persists a new goal and returns it with its ID."""
        pass

    @abstractmethod
    def get_by_id(self, goal_id: int, owner_id: int, kind: Optional[GoalKind] = None) -> Optional[GoalEntity]:
        """Returns the owner's goal (optionally only of the given kind) or None."""
        pass

    @abstractmethod
    def update(self, goal_id: int, owner_id: int, fields: Dict[str, Any]) -> bool:
        """Writes a partial update scoped to the owner. False when no row matched.

        Supported keys: is_completed, current_value, completion_count, last_completed_at.
        """
        pass


class IEventRepository(ABC):
    @abstractmethod
    def count_by_goal_and_status(self, goal_id: int, status: str) -> int:
        """Counts events linked to the goal with the given status."""
        pass
