"""Apply an edited zone list to one event.

The plan is computed and validated before the first write. Deletes run
first so a renamed zone never collides with the row it replaces, then
updates and inserts follow in the user's row order.
"""

import logging
from collections.abc import Sequence

from events.domain import DraftZone, EventId, Zone, ZonePlan, ZoneUpdate, plan_zone_changes
from events.domain.errors import PartialSequenceFailureError
from events.stores.interfaces import ZoneStore
from shared.cache import QueryInvalidator
from shared.domain import EntityType
from shared.domain.errors import DomainError

logger = logging.getLogger(__name__)


class ZoneReconciler:
    """Runs a ZonePlan against a ZoneStore."""

    def __init__(self, store: ZoneStore, invalidator: QueryInvalidator) -> None:
        self._store = store
        self._invalidator = invalidator

    def plan(self, original: Sequence[DraftZone], current: Sequence[DraftZone]) -> ZonePlan:
        return plan_zone_changes(original, current)

    def reconcile(
        self,
        event_id: EventId,
        original: Sequence[DraftZone],
        current: Sequence[DraftZone],
    ) -> list[Zone]:
        """Validate, plan and apply; return the event's zones afterwards.

        Raises:
            ValidationError: Before any write, if the drafts are unusable.
            StoreError: If a write fails and the store rolled everything back.
            PartialSequenceFailureError: If a write fails after earlier ones
                were kept by a store without transactions.
        """
        return self.apply(event_id, self.plan(original, current))

    def apply(self, event_id: EventId, plan: ZonePlan) -> list[Zone]:
        with self._store.atomic():
            self._run(event_id, plan)
        # an outer transaction may still be open here
        self._store.on_commit(lambda: self._invalidator.invalidate_entity(EntityType.ZONE))
        logger.info(
            "Reconciled zones for event %s: %d deleted, %d updated, %d inserted",
            event_id,
            len(plan.deletes),
            len(plan.updates),
            len(plan.inserts),
        )
        return self._store.list_zones(event_id)

    def _run(self, event_id: EventId, plan: ZonePlan) -> None:
        completed = 0
        try:
            if plan.deletes:
                self._store.delete_zones(event_id, plan.deletes)
                completed += 1
            for write in plan.writes:
                if isinstance(write, ZoneUpdate):
                    self._store.update_zone(event_id, write.zone_id, write.fields)
                else:
                    self._store.insert_zone(event_id, write.fields)
                completed += 1
        except DomainError as err:
            if completed and not self._store.supports_transactions:
                logger.error(
                    "Zone reconciliation for event %s stopped after %d of %d steps: %s",
                    event_id,
                    completed,
                    plan.step_count,
                    err,
                )
                self._invalidator.invalidate_entity(EntityType.ZONE)
                raise PartialSequenceFailureError(completed, plan.step_count) from err
            logger.warning("Zone reconciliation for event %s failed: %s", event_id, err)
            raise
