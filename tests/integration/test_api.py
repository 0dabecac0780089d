"""Integration tests for the FastAPI application against a SQLite file."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from pokebattle.api.app import create_app
from pokebattle.api.runtime import ApiState
from pokebattle.config import Settings


def _make_app(tmp_path, **overrides):
    def factory() -> ApiState:
        settings = Settings(database_url=f"sqlite:///{tmp_path / 'api.db'}", **overrides)
        return ApiState(settings=settings)

    app = create_app(state_factory=factory)
    transport = ASGITransport(app=app)
    return app, transport


@pytest.mark.asyncio
async def test_pokemon_lifecycle_via_api(tmp_path):
    app, transport = _make_app(tmp_path)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        response = await client.post("/pokemons", json={"species": "charizard", "trainer": "Red"})
        assert response.status_code == 201
        created = response.json()
        assert created["level"] == 1
        assert created["species"] == "charizard"
        pokemon_id = created["id"]

        response = await client.get(f"/pokemons/{pokemon_id}")
        assert response.status_code == 200
        assert response.json() == created

        response = await client.put(f"/pokemons/{pokemon_id}", json={"trainer": "Blue"})
        assert response.status_code == 204
        assert response.content == b""

        response = await client.get("/pokemons")
        assert response.status_code == 200
        assert [p["trainer"] for p in response.json()] == ["Blue"]

        response = await client.delete(f"/pokemons/{pokemon_id}")
        assert response.status_code == 204

        response = await client.get(f"/pokemons/{pokemon_id}")
        assert response.status_code == 404


@pytest.mark.asyncio
async def test_battle_via_api(tmp_path):
    app, transport = _make_app(tmp_path, battle_seed="indigo-plateau")

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        first = (
            await client.post("/pokemons", json={"species": "pikachu", "trainer": "Ash"})
        ).json()
        second = (
            await client.post("/pokemons", json={"species": "mewtwo", "trainer": "Giovanni"})
        ).json()

        response = await client.post(f"/battle/{first['id']}/{second['id']}")
        assert response.status_code == 200
        result = response.json()

        assert {result["winner"]["id"], result["loser"]["id"]} == {first["id"], second["id"]}
        assert result["winner"]["level"] == 2
        assert result["loser"]["level"] == 0

        response = await client.get(f"/pokemons/{result['loser']['id']}")
        assert response.status_code == 404

        response = await client.get(f"/pokemons/{result['winner']['id']}")
        assert response.json()["level"] == 2

        response = await client.get("/pokemons")
        assert len(response.json()) == 1


@pytest.mark.asyncio
async def test_seeded_battles_are_reproducible(tmp_path):
    outcomes = []
    for run in range(2):
        run_dir = tmp_path / f"run{run}"
        run_dir.mkdir()
        app, transport = _make_app(run_dir, battle_seed="rematch", battle_lock_rows=True)

        async with (
            app.router.lifespan_context(app),
            AsyncClient(transport=transport, base_url="http://test") as client,
        ):
            ids = []
            for trainer in ("Ash", "Gary", "Misty"):
                response = await client.post(
                    "/pokemons", json={"species": "pikachu", "trainer": trainer}
                )
                ids.append(response.json()["id"])
            winners = []
            response = await client.post(f"/battle/{ids[0]}/{ids[1]}")
            winners.append(response.json()["winner"]["id"])
            response = await client.post(f"/battle/{winners[0]}/{ids[2]}")
            winners.append(response.json()["winner"]["id"])
            outcomes.append(winners)

    assert outcomes[0] == outcomes[1]
