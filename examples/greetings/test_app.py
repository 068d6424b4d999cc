"""Tests for the greetings example."""

import pytest

from wren.testing import TestClient

pytestmark = pytest.mark.anyio


class TestGreetingsApp:
    """Every walkthrough scenario, through the ASGI pipeline."""

    async def test_hello_without_name(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/hello")
            assert response.status == 200
            assert response.text == "Hello!"

    async def test_hello_with_name(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/hello?name=Danni")
            assert response.text == "Hello, Danni!"

    async def test_say_greeting(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/say/Greetings")
            assert response.text == "Greetings!"

    async def test_say_greeting_with_name(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/say/Hola?name=Danni")
            assert response.text == "Hola, Danni!"

    async def test_earlier_route_wins_over_more_specific(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/say/goodbye")
            assert response.text == "goodbye!"

    async def test_say_without_greeting_falls_back(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/say")
            assert response.text == "The route /say does not exist!"

    async def test_invalid_state_goes_to_error_channel(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/states/California")
            assert response.status == 200
            assert response.text == "State abbreviation is invalid."

    async def test_valid_state(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/states/OR")
            assert response.text == "OR is a nice state, I'd like to visit."

    async def test_travel_shares_the_validation_handler(self, example_app) -> None:
        async with TestClient(example_app) as client:
            ok = await client.get("/travel/OR")
            bad = await client.get("/travel/Oregon")
            assert ok.text == "Enjoy your trip to OR!"
            assert bad.text == "State abbreviation is invalid."

    async def test_unknown_route(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/xyz")
            assert response.status == 200
            assert response.text == "The route /xyz does not exist!"

    async def test_request_logging_middleware_runs(self, example_app, caplog) -> None:
        caplog.set_level("INFO", logger="greetings")
        async with TestClient(example_app) as client:
            await client.get("/hello")
        assert "A request is being made to /hello" in caplog.text
