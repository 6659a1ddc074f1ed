"""Create and edit subscription plans."""

import logging

from shared.cache import QueryInvalidator
from shared.domain import EntityType
from shared.domain.errors import DomainError, NotFoundError, ValidationError
from shared.notifications import Notifier
from shared.services.entity_service import parse_entity_id
from subscriptions.domain import Plan, PlanCommand
from subscriptions.stores.interfaces import PlanStore

logger = logging.getLogger(__name__)


class PlanService:
    def __init__(self, store: PlanStore, invalidator: QueryInvalidator, notifier: Notifier) -> None:
        self._store = store
        self._invalidator = invalidator
        self._notifier = notifier

    def _failed(self, action: str, err: DomainError) -> None:
        if isinstance(err, ValidationError):
            self._notifier.error(err.message)
        else:
            self._notifier.error(f"Failed to {action} subscription plan")

    def create(self, command: PlanCommand) -> Plan:
        try:
            plan = self._store.create_plan(command)
        except DomainError as err:
            self._failed("create", err)
            raise
        self._invalidator.invalidate_entity(EntityType.SUBSCRIPTION_PLAN)
        logger.info("Created subscription plan %s", plan.id)
        self._notifier.success("Subscription plan created successfully!")
        return plan

    def update(self, plan_id: str, command: PlanCommand) -> Plan:
        """Overwrite a plan.

        Raises:
            InvalidIdError: If plan_id is not a valid UUID.
            NotFoundError: If the plan does not exist.
        """
        parsed = parse_entity_id(plan_id, "subscription plan")
        try:
            plan = self._store.update_plan(parsed, command)
            if plan is None:
                raise NotFoundError("subscription plan", plan_id)
        except DomainError as err:
            self._failed("update", err)
            raise
        self._invalidator.invalidate_entity(EntityType.SUBSCRIPTION_PLAN)
        logger.info("Updated subscription plan %s", parsed)
        self._notifier.success("Subscription plan updated successfully!")
        return plan
