from pydantic import BaseModel


class CurrentWeather(BaseModel):
    temperature: float
    temperature_unit: str = "°C"
    relative_humidity: float | None = None
    weather_code: int
    condition: str

    @property
    def temperature_label(self) -> str:
        return f"{self.temperature}{self.temperature_unit}"
