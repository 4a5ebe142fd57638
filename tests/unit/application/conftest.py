"""In-memory fakes for use case tests."""

import copy
from uuid import UUID

import pytest

from skillshare.application.planning.protocols.id_generator import IdGeneratorProtocol
from skillshare.domain.common.value_objects.ids import LearningPlanId, UserId
from skillshare.domain.identity.entities.user import User
from skillshare.domain.planning.entities.learning_plan import LearningPlan


class FakeLearningPlanRepository:
    """Stores deep copies, so use cases only see what they explicitly saved."""

    def __init__(self) -> None:
        self.plans: dict[int, LearningPlan] = {}
        self.save_count = 0
        self._next_id = 1

    def find_by_id(self, plan_id: LearningPlanId) -> LearningPlan | None:
        plan = self.plans.get(plan_id.value)
        return copy.deepcopy(plan) if plan else None

    def find_by_owner(self, user_id: UserId) -> list[LearningPlan]:
        owned = [p for p in self.plans.values() if p.user_id == user_id and not p.is_template]
        return [copy.deepcopy(p) for p in reversed(owned)]

    def find_templates(self) -> list[LearningPlan]:
        return [copy.deepcopy(p) for p in self.plans.values() if p.is_template]

    def save(self, plan: LearningPlan) -> LearningPlan:
        self.save_count += 1
        if not plan.id.is_persisted:
            plan.id = LearningPlanId(self._next_id)
            self._next_id += 1
        self.plans[plan.id.value] = copy.deepcopy(plan)
        return copy.deepcopy(plan)

    def delete(self, plan_id: LearningPlanId) -> bool:
        return self.plans.pop(plan_id.value, None) is not None


class FakeUserRepository:
    def __init__(self) -> None:
        self.users: dict[int, User] = {}
        self._next_id = 1

    def find_by_id(self, user_id: UserId) -> User | None:
        user = self.users.get(user_id.value)
        return copy.deepcopy(user) if user else None

    def find_by_ids(self, user_ids: set[UserId]) -> list[User]:
        return [copy.deepcopy(self.users[u.value]) for u in user_ids if u.value in self.users]

    def find_by_email(self, email: str) -> User | None:
        return next(
            (copy.deepcopy(u) for u in self.users.values() if u.email == email),
            None,
        )

    def save(self, user: User) -> User:
        return self.save_all([user])[0]

    def save_all(self, users: list[User]) -> list[User]:
        for user in users:
            if not user.id.is_persisted:
                user.id = UserId(self._next_id)
                self._next_id += 1
            self.users[user.id.value] = copy.deepcopy(user)
        return [copy.deepcopy(u) for u in users]


class SequentialIdGenerator:
    """Deterministic ids: UUID(int=1), UUID(int=2), ..."""

    def __init__(self) -> None:
        self.issued = 0

    def new_id(self) -> UUID:
        self.issued += 1
        return UUID(int=self.issued)


@pytest.fixture
def plan_repository() -> FakeLearningPlanRepository:
    return FakeLearningPlanRepository()


@pytest.fixture
def user_repository() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def id_generator() -> IdGeneratorProtocol:
    return SequentialIdGenerator()
