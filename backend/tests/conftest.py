"""Shared fixtures: restcountries-shaped payloads and record helpers."""

import pytest

from models.country import CountryRecord


def make_record(name, code=None, **fields):
    """Helper to build a CountryRecord with a derived 3-letter id."""
    return CountryRecord(
        id=code or name[:3].upper(),
        common_name=name,
        official_name=fields.pop("official_name", name),
        **fields,
    )


def make_records(count):
    return [make_record(f"Country {i:03d}", code=f"C{i:02d}") for i in range(count)]


RAW_FRANCE = {
    "name": {
        "common": "France",
        "official": "French Republic",
        "nativeName": {"fra": {"official": "République française", "common": "France"}},
    },
    "flags": {"png": "https://flagcdn.com/w320/fr.png", "svg": "https://flagcdn.com/fr.svg"},
    "region": "Europe",
    "subregion": "Western Europe",
    "capital": ["Paris"],
    "population": 67391582,
    "currencies": {"EUR": {"name": "Euro", "symbol": "€"}},
    "latlng": [46.0, 2.0],
    "borders": ["AND", "BEL", "DEU", "ITA", "LUX", "MCO", "ESP", "CHE"],
    "cca3": "FRA",
}

RAW_ANTARCTICA = {
    "name": {"common": "Antarctica", "official": "Antarctica", "nativeName": {}},
    "flags": {"png": "https://flagcdn.com/w320/aq.png"},
    "region": "Antarctic",
    "capital": [],
    "population": 1000,
    "latlng": [],
    "cca3": "ATA",
}

RAW_SOUTH_AFRICA = {
    "name": {
        "common": "South Africa",
        "official": "Republic of South Africa",
        "nativeName": {
            "afr": {"official": "Republiek van Suid-Afrika", "common": "Suid-Afrika"},
            "eng": {"official": "Republic of South Africa", "common": "South Africa"},
        },
    },
    "flags": {"png": "https://flagcdn.com/w320/za.png"},
    "region": "Africa",
    "capital": ["Pretoria", "Bloemfontein", "Cape Town"],
    "population": 59308690,
    "currencies": {"ZAR": {"name": "South African rand", "symbol": "R"}},
    "latlng": [-29.0, 24.0],
    "borders": ["BWA", "LSO", "MOZ", "NAM", "SWZ", "ZWE"],
    "cca3": "ZAF",
}

RAW_COUNTRIES = [RAW_SOUTH_AFRICA, RAW_FRANCE, RAW_ANTARCTICA]


@pytest.fixture
def raw_countries():
    return [dict(c) for c in RAW_COUNTRIES]
