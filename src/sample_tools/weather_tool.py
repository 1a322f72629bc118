"""
sample_tools/weather_tool.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Current weather for a city, looked up on wttr.in.

The HTTP client is injectable so tests (and long-running apps that keep a
pooled client around) can supply their own ``httpx.AsyncClient``.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
from pydantic import Field

from tool_processor.models.validated_tool import ValidatedTool

logger = logging.getLogger(__name__)

_WTTR_URL = "https://wttr.in/{city}?format=j1"
_USER_AGENT = "agent-graph-weather-tool/0.1"


class WeatherLookupError(RuntimeError):
    """wttr.in answered, but not with usable weather data."""


def _parse_current(city: str, data: Dict[str, Any]) -> Dict[str, Any]:
    conditions = data.get("current_condition") or []
    if not conditions:
        raise WeatherLookupError(f"no weather data for {city!r}")

    current = conditions[0]
    try:
        temp = int(current.get("temp_C", ""))
    except (TypeError, ValueError):
        temp = 0

    descriptions = current.get("weatherDesc") or []
    weather = descriptions[0].get("value", "") if descriptions else ""
    return {"weather": weather, "temp": temp}


class WeatherTool(ValidatedTool):
    """Look up the current weather of a city; returns its temperature (°C) and conditions."""

    name = "get_weather"

    class Arguments(ValidatedTool.Arguments):
        city: str = Field(..., description="City name, e.g. Beijing or Paris")

    class Result(ValidatedTool.Result):
        weather: str
        temp: int

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        user_agent: str = _USER_AGENT,
        timeout: float = 10.0,
    ):
        self.client = client
        self.user_agent = user_agent
        self.timeout = timeout

    async def _fetch(self, http: httpx.AsyncClient, city: str) -> httpx.Response:
        url = _WTTR_URL.format(city=quote(city))
        return await http.get(url, headers={"User-Agent": self.user_agent})

    async def _execute(self, *, city: str) -> Dict[str, Any]:
        if self.client is not None:
            rsp = await self._fetch(self.client, city)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as http:
                rsp = await self._fetch(http, city)

        if rsp.status_code != 200:
            raise WeatherLookupError(f"wttr.in returned status {rsp.status_code}")

        result = _parse_current(city, rsp.json())
        logger.debug("weather for %s: %s", city, result)
        return result
