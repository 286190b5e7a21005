import pytest

from snowrest import Snowflake
from snowrest.rest import JSONBuilder, ParamsBuilder, Response, Route


def test_route_url_quotes_parameters():
    route = Route("get", "/invites/{invite_code}", invite_code="a b/c")

    assert route.method == "GET"
    assert route.url("https://api.test/") == "https://api.test/invites/a%20b%2Fc"
    assert str(route) == "GET /invites/a%20b%2Fc"


def test_route_accepts_snowflakes():
    route = Route("GET", "/guilds/{guild_id}", guild_id=Snowflake(81384788765712384))

    assert route.compiled_path == "/guilds/81384788765712384"


def test_json_builder_copies_and_converts():
    builder = JSONBuilder(channel_id=Snowflake(7)).add("tags", ["a"])
    built = builder.build()
    built["tags"].append("b")

    assert built["channel_id"] == "7"
    assert builder.inner["tags"] == ["a"]


def test_params_builder():
    params = ParamsBuilder.from_mapping({"after": Snowflake(9), "limit": 100}).add(
        "with_counts", True
    )

    assert params.build() == {"after": "9", "limit": "100", "with_counts": "true"}


def test_response_json():
    json_response = Response(200, '{"a": 1}', "application/json; charset=utf-8")
    assert json_response.json() == {"a": 1}
    assert Response(204, "").json() is None

    with pytest.raises(ValueError):
        Response(200, "<html>", "text/html").json()
