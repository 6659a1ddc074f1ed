"""Store interfaces (repository pattern) for subscription plans."""

from abc import ABC, abstractmethod

from shared.domain import EntityId
from subscriptions.domain import Plan, PlanCommand


class PlanStore(ABC):
    @abstractmethod
    def create_plan(self, command: PlanCommand) -> Plan:
        ...

    @abstractmethod
    def update_plan(self, plan_id: EntityId, command: PlanCommand) -> Plan | None:
        """Overwrite every form field; None if the plan does not exist."""
        ...
