"""Django ORM implementation of the PlanStore."""

from dataclasses import asdict

from shared.domain import EntityId
from shared.stores.django_store import translate_database_errors
from subscriptions import models as orm
from subscriptions.domain import Plan, PlanCommand
from subscriptions.stores.interfaces import PlanStore


def plan_to_domain(plan: orm.SubscriptionPlan) -> Plan:
    return Plan(
        id=plan.id,
        name=plan.name,
        description=plan.description,
        price_monthly=plan.price_monthly,
        price_yearly=plan.price_yearly,
        tier_level=plan.tier_level,
        features=dict(plan.features or {}),
        benefits=tuple(plan.benefits or ()),
        is_active=plan.is_active,
        created_at=plan.created_at,
        updated_at=plan.updated_at,
    )


def _columns(command: PlanCommand) -> dict:
    columns = asdict(command)
    columns["benefits"] = list(command.benefits)
    return columns


class DjangoPlanStore(PlanStore):
    def create_plan(self, command: PlanCommand) -> Plan:
        with translate_database_errors("create subscription plan"):
            plan = orm.SubscriptionPlan.objects.create(**_columns(command))
        return plan_to_domain(plan)

    def update_plan(self, plan_id: EntityId, command: PlanCommand) -> Plan | None:
        with translate_database_errors("update subscription plan"):
            plan = orm.SubscriptionPlan.objects.filter(pk=plan_id.value).first()
            if plan is None:
                return None
            for column, value in _columns(command).items():
                setattr(plan, column, value)
            plan.save()
        return plan_to_domain(plan)
