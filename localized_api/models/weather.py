import datetime

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel


class WeatherForecast(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: datetime.date
    temperature_c: int
    summary: str | None = None

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        return 32 + int(self.temperature_c / 0.5556)
