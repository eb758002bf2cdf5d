"""Shared test fixtures.

Provides:
- In-memory test doubles for every repository (no database needed)
- A full app from create_app() with those doubles wired onto app.state
- An httpx AsyncClient with auth overridden to a fixed staff user
"""

from __future__ import annotations

import uuid
from collections import Counter
from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.fundrazor.campaigns.schemas import CampaignRead
from src.fundrazor.campaigns.service import CampaignService
from src.fundrazor.canvases.schemas import CanvasRead
from src.fundrazor.canvases.service import CanvasService
from src.fundrazor.data_health.service import DataHealthService
from src.fundrazor.interactions.schemas import InteractionRead
from src.fundrazor.interactions.service import InteractionService
from src.fundrazor.people.schemas import OpportunityRead, PersonRead
from src.fundrazor.people.service import OpportunityService, PersonService
from src.fundrazor.users.schemas import UserInternal, UserRead
from src.fundrazor.users.service import AuthService

TEST_USER = UserRead(
    id="11111111-1111-1111-1111-111111111111",
    email="mgo@example.org",
    first_name="Morgan",
    last_name="Giver",
    role="MGO",
)

FIXED_NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _now() -> datetime:
    return datetime.now(timezone.utc)


# ── In-Memory Test Doubles ───────────────────────────────────────────────────


class InMemoryCampaignStore:
    """In-memory CampaignRepository for testing without database."""

    def __init__(self) -> None:
        self._campaigns: dict[str, CampaignRead] = {}

    async def list_campaigns(
        self, status: str | None = None, owner_id: str | None = None
    ) -> list[CampaignRead]:
        campaigns = [
            c for c in self._campaigns.values()
            if (status is None or c.status == status)
            and (owner_id is None or c.owner_id == owner_id)
        ]
        far_future = datetime.max.replace(tzinfo=timezone.utc)
        return sorted(campaigns, key=lambda c: c.start_date or far_future)

    async def get_campaign(self, campaign_id: str) -> CampaignRead | None:
        return self._campaigns.get(campaign_id)

    async def create_campaign(self, values: dict[str, Any]) -> CampaignRead:
        now = _now()
        record = {
            "status": "planning",
            "raised": Decimal("0.00"),
            "donor_count": 0,
            "total_gifts": 0,
            **values,
            "id": str(uuid.uuid4()),
            "created_at": now,
            "updated_at": now,
        }
        campaign = CampaignRead(**record)
        self._campaigns[campaign.id] = campaign
        return campaign

    async def update_campaign(
        self, campaign_id: str, changes: dict[str, Any]
    ) -> CampaignRead | None:
        existing = self._campaigns.get(campaign_id)
        if existing is None:
            return None
        updated = existing.model_copy(update={**changes, "updated_at": _now()})
        self._campaigns[campaign_id] = updated
        return updated

    async def delete_campaign(self, campaign_id: str) -> CampaignRead | None:
        return self._campaigns.pop(campaign_id, None)


class InMemoryInteractionStore:
    def __init__(self) -> None:
        self._interactions: dict[str, InteractionRead] = {}

    async def list_interactions(self, person_id: str | None = None) -> list[InteractionRead]:
        items = [
            i for i in self._interactions.values()
            if person_id is None or i.person_id == person_id
        ]
        return sorted(items, key=lambda i: i.occurred_at, reverse=True)

    async def get_interaction(self, interaction_id: str) -> InteractionRead | None:
        return self._interactions.get(interaction_id)

    async def create_interaction(self, values: dict[str, Any]) -> InteractionRead:
        now = _now()
        interaction = InteractionRead(
            **values, id=str(uuid.uuid4()), created_at=now, updated_at=now
        )
        self._interactions[interaction.id] = interaction
        return interaction

    async def update_interaction(
        self, interaction_id: str, changes: dict[str, Any]
    ) -> InteractionRead | None:
        existing = self._interactions.get(interaction_id)
        if existing is None:
            return None
        updated = existing.model_copy(update={**changes, "updated_at": _now()})
        self._interactions[interaction_id] = updated
        return updated

    async def delete_interaction(self, interaction_id: str) -> InteractionRead | None:
        return self._interactions.pop(interaction_id, None)


class InMemoryCanvasStore:
    def __init__(self) -> None:
        self._canvases: dict[str, CanvasRead] = {}

    async def list_canvases(self, owner_id: str | None = None) -> list[CanvasRead]:
        items = [
            c for c in self._canvases.values()
            if not owner_id or c.owner_id == owner_id
        ]
        return sorted(items, key=lambda c: c.updated_at, reverse=True)

    async def get_canvas(self, canvas_id: str) -> CanvasRead | None:
        return self._canvases.get(canvas_id)

    async def create_canvas(self, values: dict[str, Any]) -> CanvasRead:
        now = _now()
        canvas = CanvasRead(**values, id=str(uuid.uuid4()), created_at=now, updated_at=now)
        self._canvases[canvas.id] = canvas
        return canvas

    async def update_canvas(self, canvas_id: str, changes: dict[str, Any]) -> CanvasRead | None:
        existing = self._canvases.get(canvas_id)
        if existing is None:
            return None
        updated = existing.model_copy(update={**changes, "updated_at": _now()})
        self._canvases[canvas_id] = updated
        return updated

    async def delete_canvas(self, canvas_id: str) -> CanvasRead | None:
        return self._canvases.pop(canvas_id, None)


class InMemoryPeopleStore:
    """In-memory PeopleRepository covering persons and opportunities."""

    def __init__(self) -> None:
        self._persons: dict[str, PersonRead] = {}
        self._opportunities: dict[str, OpportunityRead] = {}

    async def list_persons(self, search: str | None = None) -> list[PersonRead]:
        needle = (search or "").lower()
        persons = [
            p for p in self._persons.values()
            if not needle
            or needle in p.first_name.lower()
            or needle in p.last_name.lower()
            or needle in (p.primary_email or "").lower()
        ]
        return sorted(persons, key=lambda p: (p.last_name, p.first_name))

    async def get_person(self, person_id: str) -> PersonRead | None:
        return self._persons.get(person_id)

    async def create_person(self, values: dict[str, Any]) -> PersonRead:
        now = _now()
        person = PersonRead(**values, id=str(uuid.uuid4()), created_at=now, updated_at=now)
        self._persons[person.id] = person
        return person

    async def update_person(self, person_id: str, changes: dict[str, Any]) -> PersonRead | None:
        existing = self._persons.get(person_id)
        if existing is None:
            return None
        updated = existing.model_copy(update={**changes, "updated_at": _now()})
        self._persons[person_id] = updated
        return updated

    async def delete_person(self, person_id: str) -> PersonRead | None:
        return self._persons.pop(person_id, None)

    async def list_opportunities(
        self, person_id: str | None = None, owner_id: str | None = None
    ) -> list[OpportunityRead]:
        items = [
            o for o in self._opportunities.values()
            if (person_id is None or o.person_id == person_id)
            and (owner_id is None or o.owner_id == owner_id)
        ]
        dated = sorted((o for o in items if o.close_date), key=lambda o: o.close_date, reverse=True)
        return dated + [o for o in items if not o.close_date]

    async def get_opportunity(self, opportunity_id: str) -> OpportunityRead | None:
        return self._opportunities.get(opportunity_id)

    async def create_opportunity(self, values: dict[str, Any]) -> OpportunityRead:
        now = _now()
        opportunity = OpportunityRead(
            **{"stage": "Prospect", **values}, id=str(uuid.uuid4()), created_at=now, updated_at=now
        )
        self._opportunities[opportunity.id] = opportunity
        return opportunity

    async def update_opportunity(
        self, opportunity_id: str, changes: dict[str, Any]
    ) -> OpportunityRead | None:
        existing = self._opportunities.get(opportunity_id)
        if existing is None:
            return None
        updated = existing.model_copy(update={**changes, "updated_at": _now()})
        self._opportunities[opportunity_id] = updated
        return updated

    async def delete_opportunity(self, opportunity_id: str) -> OpportunityRead | None:
        return self._opportunities.pop(opportunity_id, None)


class InMemoryDataHealthStore:
    """Person/interaction/opportunity snapshot mirroring the SQL aggregates."""

    def __init__(
        self,
        persons: list[PersonRead] | None = None,
        interaction_times: list[datetime] | None = None,
        opportunity_owners: list[str | None] | None = None,
    ) -> None:
        self.persons = persons or []
        self.interaction_times = interaction_times or []
        self.opportunity_owners = opportunity_owners or []

    async def list_persons(self) -> list[PersonRead]:
        return list(self.persons)

    async def count_interactions_since(self, cutoff: datetime) -> int:
        return sum(1 for t in self.interaction_times if t >= cutoff)

    async def count_unassigned_opportunities(self) -> int:
        return sum(1 for owner in self.opportunity_owners if not owner)

    async def count_duplicate_name_groups(self) -> int:
        names = Counter(f"{p.first_name} {p.last_name}".lower() for p in self.persons)
        return sum(1 for count in names.values() if count > 1)


class InMemoryUserStore:
    def __init__(self) -> None:
        self._users: dict[str, UserInternal] = {}

    async def get_active_user(self, user_id: str) -> UserInternal | None:
        user = self._users.get(user_id)
        return user if user and user.is_active else None

    async def get_by_email(self, email: str) -> UserInternal | None:
        for user in self._users.values():
            if user.email.lower() == email.lower():
                return user
        return None

    async def create_user(self, values: dict[str, Any]) -> UserInternal:
        user = UserInternal(
            **values, id=str(uuid.uuid4()), is_active=True, created_at=_now()
        )
        self._users[user.id] = user
        return user


def _make_person(**overrides: Any) -> PersonRead:
    """A complete person (email, phone, organization) unless overridden."""
    values: dict[str, Any] = {
        "id": str(uuid.uuid4()),
        "first_name": "Pat",
        "last_name": f"Donor-{uuid.uuid4().hex[:6]}",
        "primary_email": "pat@example.org",
        "primary_phone": "555-0100",
        "organization_name": "Giving Circle",
        "wealth_band": None,
    }
    values.update(overrides)
    return PersonRead(**values)


@pytest.fixture
def person_factory():
    """Builder for PersonRead snapshots; complete unless overridden."""
    return _make_person


# ── App Fixtures ─────────────────────────────────────────────────────────────


class Stores:
    def __init__(self) -> None:
        self.campaigns = InMemoryCampaignStore()
        self.interactions = InMemoryInteractionStore()
        self.canvases = InMemoryCanvasStore()
        self.people = InMemoryPeopleStore()
        self.data_health = InMemoryDataHealthStore()
        self.users = InMemoryUserStore()


def wire_services(app, stores: Stores) -> None:
    app.state.user_repository = stores.users
    app.state.auth_service = AuthService(stores.users)
    app.state.person_service = PersonService(stores.people)
    app.state.opportunity_service = OpportunityService(stores.people, now=lambda: FIXED_NOW)
    app.state.campaign_service = CampaignService(stores.campaigns)
    app.state.interaction_service = InteractionService(stores.interactions)
    app.state.canvas_service = CanvasService(stores.canvases)
    app.state.data_health_service = DataHealthService(
        stores.data_health, now=lambda: FIXED_NOW
    )


def _mock_get_current_user() -> UserRead:
    return TEST_USER


@pytest.fixture
def stores() -> Stores:
    return Stores()


@pytest.fixture
def app(stores):
    """Full application with in-memory stores; lifespan is not run."""
    from src.fundrazor.main import create_app

    application = create_app()
    wire_services(application, stores)
    return application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Client whose requests are authenticated as TEST_USER."""
    from src.fundrazor.api.deps import get_current_user

    app.dependency_overrides[get_current_user] = _mock_get_current_user
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def anon_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Client with no auth override; protected routes need a real token."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_health_store():
    """Constructor for standalone in-memory data-health stores."""
    return InMemoryDataHealthStore
