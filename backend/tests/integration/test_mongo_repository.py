"""
Integration test: MongoAccountRepository against a real MongoDB.

Skipped unless FLIPBALL_TEST_MONGO_URI points at a server the test may
write to. Each test uses a throwaway database that is dropped afterwards.
"""

import asyncio
import os
import uuid

import pytest
from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from flipball.database.repositories import MongoAccountRepository
from flipball.models import Account, get_document_models
from flipball.services import AccountService, WagerService
from flipball.utils.errors import DuplicateUser
from tests.fakes import ScriptedRandomSource

MONGO_URI = os.environ.get("FLIPBALL_TEST_MONGO_URI")

pytestmark = pytest.mark.skipif(not MONGO_URI, reason="FLIPBALL_TEST_MONGO_URI not set")


def run_with_database(scenario):
    async def run():
        client = AsyncIOMotorClient(MONGO_URI)
        name = f"flipball_test_{uuid.uuid4().hex[:8]}"
        try:
            await init_beanie(database=client[name], document_models=get_document_models())
            return await scenario(MongoAccountRepository(), client[name])
        finally:
            await client.drop_database(name)
            client.close()

    return asyncio.run(run())


def test_create_find_and_duplicate() -> None:
    async def scenario(repo, db):
        created = await repo.create(Account(email="ada@example.com", password="secret"))
        assert created.balance == 100

        with pytest.raises(DuplicateUser):
            await repo.create(Account(email="ada@example.com", password="other"))

        found = await repo.find_by_email("ada@example.com")
        assert found.password == "secret"
        assert await repo.find_by_email("nobody@example.com") is None

    run_with_database(scenario)


def test_play_writes_camel_case_counter() -> None:
    async def scenario(repo, db):
        await AccountService().create_account(repo, "ada@example.com", "Ada", "L", "secret")
        await repo.update("ada@example.com", {"attempts": 1, "total_attempts_played": 1})

        outcome = await WagerService(random_source=ScriptedRandomSource()).play(
            repo, "ada@example.com", 100, 2
        )
        assert outcome.new_balance == 600

        raw = await db["users"].find_one({"email": "ada@example.com"})
        assert raw["balance"] == 600
        assert raw["attempts"] == 0
        assert raw["totalAttemptsPlayed"] == 2

    run_with_database(scenario)
