import random
from datetime import date, timedelta
from typing import Callable, List, Optional

from localized_api.models.weather import WeatherForecast

SUMMARIES = [
    "Freezing", "Bracing", "Chilly", "Cool", "Mild", "Warm", "Balmy", "Hot", "Sweltering", "Scorching"
]

# Celsius range is [MIN, MAX)
MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 55


class ForecastGenerator:
    """Generates random forecasts for the days following today.

    Pass a seeded ``random.Random`` and a fixed ``today`` callable for
    deterministic output in tests.
    """

    def __init__(self, rng: Optional[random.Random] = None, today: Optional[Callable[[], date]] = None):
        self.rng = rng or random.Random()
        self.today = today or date.today

    def generate(self, days: int = 5) -> List[WeatherForecast]:
        start = self.today()
        return [
            WeatherForecast(
                date=start + timedelta(days=index),
                temperature_c=self.rng.randrange(MIN_TEMPERATURE_C, MAX_TEMPERATURE_C),
                summary=self.rng.choice(SUMMARIES),
            )
            for index in range(1, days + 1)
        ]
