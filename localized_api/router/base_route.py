import logging
from typing import Annotated, List

from fastapi import APIRouter, Body, Query, Request

from localized_api.models.person import Person
from localized_api.models.weather import WeatherForecast
from localized_api.services.forecast import ForecastGenerator

logger = logging.getLogger("localized_api.base_route")

router = APIRouter()


@router.get(
    "/weatherforecast",
    response_model=List[WeatherForecast],
    operation_id="GetWeatherForecast",
    summary="Get the weather forecast",
    description="The forecast for the next days",
)
def get_weather_forecast(
    request: Request,
    days: Annotated[int, Query(ge=0, description="The number of days")] = 5,
):
    forecast = ForecastGenerator().generate(days)
    culture = getattr(request.state, "culture", None)
    logger.info("Generated %d forecast days culture=%s", len(forecast), culture.culture if culture else None)
    return forecast


@router.post("/api/person", response_model=Person)
def create_person(person: Annotated[Person, Body(description="The person to create")]):
    logger.debug("Echoing person name=%s city=%s", person.name, person.city)
    return person
