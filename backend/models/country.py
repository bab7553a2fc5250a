from pydantic import BaseModel, ConfigDict

from utils.formatting import format_number, safe_text


def _text(value) -> str | None:
    """Return non-blank strings, None for anything else."""
    if isinstance(value, str) and value.strip():
        return value
    return None


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value == value


class CountryRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    common_name: str = "Unknown"
    official_name: str = "Unknown"
    region: str | None = None
    subregion: str | None = None
    capital: str | None = None
    population: int | None = None
    flag_url: str | None = None
    native_name: str | None = None
    currency_symbol: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    borders: tuple[str, ...] = ()

    @classmethod
    def from_api(cls, raw: dict) -> "CountryRecord":
        """Build a record from one restcountries v3.1 entry.

        Missing or malformed fields fall back to defaults instead of raising.
        """
        name = raw.get("name")
        if not isinstance(name, dict):
            name = {}
        common = _text(name.get("common")) or "Unknown"

        native_name = None
        natives = name.get("nativeName")
        if isinstance(natives, dict) and natives:
            first = next(iter(natives.values()))
            if isinstance(first, dict):
                native_name = _text(first.get("common"))

        currency_symbol = None
        currencies = raw.get("currencies")
        if isinstance(currencies, dict) and currencies:
            first = next(iter(currencies.values()))
            if isinstance(first, dict):
                currency_symbol = _text(first.get("symbol"))

        latitude = longitude = None
        latlng = raw.get("latlng")
        if (
            isinstance(latlng, (list, tuple))
            and len(latlng) == 2
            and all(_is_number(v) for v in latlng)
        ):
            latitude, longitude = latlng

        capital = raw.get("capital")
        if isinstance(capital, (list, tuple)):
            capital = ", ".join(c for c in capital if _text(c))
        capital = _text(capital)

        flags = raw.get("flags")
        flag_url = _text(flags.get("png")) if isinstance(flags, dict) else None
        population = raw.get("population")
        borders = raw.get("borders")
        if not isinstance(borders, (list, tuple)):
            borders = ()

        return cls(
            id=(_text(raw.get("cca3")) or "").upper(),
            common_name=common,
            official_name=_text(name.get("official")) or common,
            region=_text(raw.get("region")),
            subregion=_text(raw.get("subregion")),
            capital=capital,
            population=population if isinstance(population, int) and not isinstance(population, bool) else None,
            flag_url=flag_url,
            native_name=native_name,
            currency_symbol=currency_symbol,
            latitude=latitude,
            longitude=longitude,
            borders=tuple(b for b in borders if _text(b)),
        )

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def display_fields(self) -> dict[str, str]:
        return {
            "region": safe_text(self.region),
            "subregion": safe_text(self.subregion),
            "capital": safe_text(self.capital),
            "population": format_number(self.population),
            "native_name": safe_text(self.native_name),
            "currency": safe_text(self.currency_symbol),
            "borders": safe_text(list(self.borders)),
        }


class CountryCard(BaseModel):
    id: str
    name: str
    flag_url: str | None = None
    region: str
    capital: str
    population: str

    @classmethod
    def from_record(cls, record: CountryRecord) -> "CountryCard":
        fields = record.display_fields
        return cls(
            id=record.id,
            name=record.common_name,
            flag_url=record.flag_url,
            region=fields["region"],
            capital=fields["capital"],
            population=fields["population"],
        )
