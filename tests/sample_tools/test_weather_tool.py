# tests/sample_tools/test_weather_tool.py
import json

import httpx
import pytest

from sample_tools.weather_tool import WeatherLookupError, WeatherTool

WTTR_PAYLOAD = {
    "current_condition": [
        {"temp_C": "21", "weatherDesc": [{"value": "Partly cloudy"}]},
    ],
}


def make_tool(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return WeatherTool(client)


@pytest.mark.asyncio
async def test_lookup_success():
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json=WTTR_PAYLOAD)

    tool = make_tool(handler)
    out = json.loads(await tool.invoke('{"city": "Beijing"}'))

    assert out == {"weather": "Partly cloudy", "temp": 21}
    request = seen["request"]
    assert request.url.host == "wttr.in"
    assert request.url.path == "/Beijing"
    assert request.url.params["format"] == "j1"
    assert request.headers["User-Agent"].startswith("agent-graph-weather-tool")


@pytest.mark.asyncio
async def test_city_is_url_quoted():
    seen = {}

    def handler(request):
        seen["raw_path"] = request.url.raw_path
        return httpx.Response(200, json=WTTR_PAYLOAD)

    await make_tool(handler).arun({"city": "New York"})

    assert seen["raw_path"].startswith(b"/New%20York")


@pytest.mark.asyncio
async def test_non_200_status():
    tool = make_tool(lambda request: httpx.Response(503, text="busy"))
    with pytest.raises(WeatherLookupError, match="503"):
        await tool.arun({"city": "Oslo"})


@pytest.mark.asyncio
async def test_empty_current_condition():
    tool = make_tool(lambda request: httpx.Response(200, json={"current_condition": []}))
    with pytest.raises(WeatherLookupError, match="no weather data"):
        await tool.arun({"city": "Atlantis"})


@pytest.mark.asyncio
async def test_unparsable_temperature_and_missing_description():
    payload = {"current_condition": [{"temp_C": "n/a"}]}
    tool = make_tool(lambda request: httpx.Response(200, json=payload))

    assert await tool.arun({"city": "Lima"}) == {"weather": "", "temp": 0}


def test_tool_info():
    info = WeatherTool.info
    assert info.name == "get_weather"
    assert "weather" in info.description
    assert info.parameters.required == ["city"]
    assert info.parameters.properties["city"].description.startswith("City name")


@pytest.mark.asyncio
async def test_missing_city_rejected():
    tool = make_tool(lambda request: httpx.Response(200, json=WTTR_PAYLOAD))
    with pytest.raises(ValueError):
        await tool.invoke("{}")
