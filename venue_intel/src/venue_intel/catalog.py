"""Curated lookup tables: recognised zones, venue coordinates, cities and urban centers.

All tables are module-level constants and are never mutated after import.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple


class CatalogEntry(NamedTuple):
    latitude: float
    longitude: float
    zone_id: str
    label: str


class UrbanCenter(NamedTuple):
    name: str
    latitude: float
    longitude: float
    radius: float  # degrees


# Zones the resolver is allowed to return. Anything else is discarded.
RECOGNIZED_ZONES: frozenset[str] = frozenset(
    {
        "UTC",
        # Europe
        "Europe/London",
        "Europe/Paris",
        "Europe/Berlin",
        "Europe/Rome",
        "Europe/Madrid",
        "Europe/Lisbon",
        "Europe/Amsterdam",
        "Europe/Brussels",
        "Europe/Vienna",
        "Europe/Zurich",
        "Europe/Zagreb",
        "Europe/Stockholm",
        "Europe/Oslo",
        "Europe/Copenhagen",
        "Europe/Helsinki",
        "Europe/Warsaw",
        "Europe/Prague",
        "Europe/Budapest",
        "Europe/Bucharest",
        "Europe/Sofia",
        "Europe/Athens",
        "Europe/Istanbul",
        "Europe/Moscow",
        # Americas
        "America/New_York",
        "America/Chicago",
        "America/Denver",
        "America/Los_Angeles",
        "America/Toronto",
        "America/Vancouver",
        "America/Mexico_City",
        "America/Tijuana",
        "America/Sao_Paulo",
        "America/Buenos_Aires",
        "America/Argentina/Buenos_Aires",
        "America/Lima",
        "America/Bogota",
        "America/Caracas",
        # Asia
        "Asia/Tokyo",
        "Asia/Shanghai",
        "Asia/Hong_Kong",
        "Asia/Singapore",
        "Asia/Seoul",
        "Asia/Dubai",
        "Asia/Riyadh",
        "Asia/Kolkata",
        # Oceania
        "Australia/Sydney",
        "Australia/Melbourne",
        "Australia/Perth",
        "Pacific/Auckland",
        # Africa
        "Africa/Johannesburg",
        "Africa/Cairo",
        "Africa/Lagos",
    }
)

# Representative stadium coordinates per football city.
# "Europe/Porto" is not a real zone; validation discards it and the
# resolver falls through to the location tables.
VENUE_COORDINATES: tuple[CatalogEntry, ...] = (
    # England
    CatalogEntry(51.5074, -0.1278, "Europe/London", "London"),
    CatalogEntry(53.4808, -2.2426, "Europe/London", "Manchester"),
    CatalogEntry(53.4084, -2.9916, "Europe/London", "Liverpool"),
    CatalogEntry(52.4862, -1.8904, "Europe/London", "Birmingham"),
    CatalogEntry(52.9548, -1.1581, "Europe/London", "Nottingham"),
    CatalogEntry(53.8008, -1.5491, "Europe/London", "Leeds"),
    CatalogEntry(53.4308, -2.9608, "Europe/London", "Stoke"),
    CatalogEntry(52.2053, 0.1218, "Europe/London", "Cambridge"),
    CatalogEntry(51.4545, -2.5879, "Europe/London", "Bristol"),
    CatalogEntry(50.9097, -1.4044, "Europe/London", "Southampton"),
    CatalogEntry(50.7184, -3.5339, "Europe/London", "Exeter"),
    # Wales, Scotland, Ireland
    CatalogEntry(51.4816, -3.1791, "Europe/London", "Cardiff"),
    CatalogEntry(55.9533, -3.1883, "Europe/London", "Edinburgh"),
    CatalogEntry(55.8642, -4.2518, "Europe/London", "Glasgow"),
    CatalogEntry(54.5973, -5.9301, "Europe/London", "Belfast"),
    CatalogEntry(53.3498, -6.2603, "Europe/London", "Dublin"),
    # Spain
    CatalogEntry(40.4168, -3.7038, "Europe/Madrid", "Madrid"),
    CatalogEntry(41.3851, 2.1734, "Europe/Madrid", "Barcelona"),
    CatalogEntry(37.3891, -5.9845, "Europe/Madrid", "Seville"),
    CatalogEntry(43.2627, -2.9253, "Europe/Madrid", "Bilbao"),
    # Germany
    CatalogEntry(52.5200, 13.4050, "Europe/Berlin", "Berlin"),
    CatalogEntry(48.1351, 11.5820, "Europe/Berlin", "Munich"),
    CatalogEntry(50.9375, 6.9603, "Europe/Berlin", "Cologne"),
    CatalogEntry(53.5511, 9.9937, "Europe/Berlin", "Hamburg"),
    # Italy
    CatalogEntry(41.9028, 12.4964, "Europe/Rome", "Rome"),
    CatalogEntry(45.4642, 9.1900, "Europe/Rome", "Milan"),
    CatalogEntry(40.8518, 14.2681, "Europe/Rome", "Naples"),
    CatalogEntry(44.4056, 8.9463, "Europe/Rome", "Genoa"),
    # France
    CatalogEntry(48.8566, 2.3522, "Europe/Paris", "Paris"),
    CatalogEntry(43.2965, 5.3698, "Europe/Paris", "Marseille"),
    CatalogEntry(45.7640, 4.8357, "Europe/Paris", "Lyon"),
    # Netherlands, Belgium
    CatalogEntry(52.3676, 4.9041, "Europe/Amsterdam", "Amsterdam"),
    CatalogEntry(51.9225, 4.4792, "Europe/Amsterdam", "Rotterdam"),
    CatalogEntry(50.8503, 4.3517, "Europe/Brussels", "Brussels"),
    # Portugal
    CatalogEntry(38.7223, -9.1393, "Europe/Lisbon", "Lisbon"),
    CatalogEntry(41.1579, -8.6291, "Europe/Porto", "Porto"),
    # Turkey
    CatalogEntry(39.9334, 32.8597, "Europe/Istanbul", "Ankara"),
    # USA
    CatalogEntry(40.7128, -74.0060, "America/New_York", "New York"),
    CatalogEntry(34.0522, -118.2437, "America/Los_Angeles", "Los Angeles"),
    CatalogEntry(41.8781, -87.6298, "America/Chicago", "Chicago"),
    CatalogEntry(39.7392, -104.9903, "America/Denver", "Denver"),
    # Canada
    CatalogEntry(43.6532, -79.3832, "America/Toronto", "Toronto"),
    CatalogEntry(49.2827, -123.1207, "America/Vancouver", "Vancouver"),
    # Mexico
    CatalogEntry(19.4326, -99.1332, "America/Mexico_City", "Mexico City"),
    CatalogEntry(32.0649, -115.0077, "America/Tijuana", "Tijuana"),
    # Brazil, Argentina
    CatalogEntry(-23.5505, -46.6333, "America/Sao_Paulo", "São Paulo"),
    CatalogEntry(-22.9068, -43.1729, "America/Sao_Paulo", "Rio de Janeiro"),
    CatalogEntry(-34.6118, -58.3960, "America/Argentina/Buenos_Aires", "Buenos Aires"),
    # East Asia
    CatalogEntry(35.6762, 139.6503, "Asia/Tokyo", "Tokyo"),
    CatalogEntry(34.6937, 135.5023, "Asia/Tokyo", "Osaka"),
    CatalogEntry(37.5665, 126.9780, "Asia/Seoul", "Seoul"),
    CatalogEntry(39.9042, 116.4074, "Asia/Shanghai", "Beijing"),
    CatalogEntry(31.2304, 121.4737, "Asia/Shanghai", "Shanghai"),
    # Australia
    CatalogEntry(-33.8688, 151.2093, "Australia/Sydney", "Sydney"),
    CatalogEntry(-37.8136, 144.9631, "Australia/Melbourne", "Melbourne"),
    # South Africa
    CatalogEntry(-26.2041, 28.0473, "Africa/Johannesburg", "Johannesburg"),
    CatalogEntry(-33.9249, 18.4241, "Africa/Johannesburg", "Cape Town"),
)

# Coordinate matches farther than this (degrees) are ignored.
MAX_CATALOG_DISTANCE = 1.0

CITY_ZONES: MappingProxyType[str, str] = MappingProxyType(
    {
        # England, Wales, Scotland
        "London": "Europe/London",
        "Manchester": "Europe/London",
        "Liverpool": "Europe/London",
        "Birmingham": "Europe/London",
        "Leeds": "Europe/London",
        "Sheffield": "Europe/London",
        "Newcastle": "Europe/London",
        "Bristol": "Europe/London",
        "Southampton": "Europe/London",
        "Cardiff": "Europe/London",
        "Edinburgh": "Europe/London",
        "Glasgow": "Europe/London",
        "Aberdeen": "Europe/London",
        # Spain
        "Madrid": "Europe/Madrid",
        "Barcelona": "Europe/Madrid",
        "Seville": "Europe/Madrid",
        "Valencia": "Europe/Madrid",
        "Bilbao": "Europe/Madrid",
        # Germany
        "Berlin": "Europe/Berlin",
        "Munich": "Europe/Berlin",
        "Hamburg": "Europe/Berlin",
        "Cologne": "Europe/Berlin",
        "Frankfurt": "Europe/Berlin",
        # Italy
        "Rome": "Europe/Rome",
        "Milan": "Europe/Rome",
        "Naples": "Europe/Rome",
        "Turin": "Europe/Rome",
        "Florence": "Europe/Rome",
        # France
        "Paris": "Europe/Paris",
        "Marseille": "Europe/Paris",
        "Lyon": "Europe/Paris",
        "Toulouse": "Europe/Paris",
        # Netherlands
        "Amsterdam": "Europe/Amsterdam",
        "Rotterdam": "Europe/Amsterdam",
        "The Hague": "Europe/Amsterdam",
        # Portugal
        "Lisbon": "Europe/Lisbon",
        "Porto": "Europe/Lisbon",
        # Croatia
        "Zagreb": "Europe/Zagreb",
        "Split": "Europe/Zagreb",
        "Rijeka": "Europe/Zagreb",
        # Belgium
        "Brussels": "Europe/Brussels",
        "Antwerp": "Europe/Brussels",
        # Turkey
        "Istanbul": "Europe/Istanbul",
        "Ankara": "Europe/Istanbul",
        "Izmir": "Europe/Istanbul",
        # USA
        "New York": "America/New_York",
        "Los Angeles": "America/Los_Angeles",
        "Chicago": "America/Chicago",
        "Houston": "America/Chicago",
        "Phoenix": "America/Denver",
        "Denver": "America/Denver",
        # Canada
        "Toronto": "America/Toronto",
        "Vancouver": "America/Vancouver",
        "Montreal": "America/Toronto",
        # Mexico
        "Mexico City": "America/Mexico_City",
        "Guadalajara": "America/Mexico_City",
        "Monterrey": "America/Mexico_City",
        # Brazil
        "São Paulo": "America/Sao_Paulo",
        "Rio de Janeiro": "America/Sao_Paulo",
        "Brasília": "America/Sao_Paulo",
        # Argentina
        "Buenos Aires": "America/Argentina/Buenos_Aires",
        "Córdoba": "America/Argentina/Buenos_Aires",
        "Rosario": "America/Argentina/Buenos_Aires",
        # Japan
        "Tokyo": "Asia/Tokyo",
        "Osaka": "Asia/Tokyo",
        "Yokohama": "Asia/Tokyo",
        # South Korea
        "Seoul": "Asia/Seoul",
        "Busan": "Asia/Seoul",
        "Incheon": "Asia/Seoul",
        # China
        "Beijing": "Asia/Shanghai",
        "Shanghai": "Asia/Shanghai",
        "Guangzhou": "Asia/Shanghai",
        # Australia
        "Sydney": "Australia/Sydney",
        "Melbourne": "Australia/Melbourne",
        "Brisbane": "Australia/Sydney",
        "Perth": "Australia/Perth",
        # South Africa
        "Johannesburg": "Africa/Johannesburg",
        "Cape Town": "Africa/Johannesburg",
        "Durban": "Africa/Johannesburg",
    }
)

COUNTRY_ZONES: MappingProxyType[str, str] = MappingProxyType(
    {
        "England": "Europe/London",
        "Scotland": "Europe/London",
        "Wales": "Europe/London",
        "Northern Ireland": "Europe/London",
        "Spain": "Europe/Madrid",
        "Germany": "Europe/Berlin",
        "Italy": "Europe/Rome",
        "France": "Europe/Paris",
        "Netherlands": "Europe/Amsterdam",
        "Portugal": "Europe/Lisbon",
        "Croatia": "Europe/Zagreb",
        "Belgium": "Europe/Brussels",
        "Turkey": "Europe/Istanbul",
        "USA": "America/New_York",
        "Canada": "America/Toronto",
        "Mexico": "America/Mexico_City",
        "Brazil": "America/Sao_Paulo",
        "Argentina": "America/Argentina/Buenos_Aires",
        "Japan": "Asia/Tokyo",
        "South Korea": "Asia/Seoul",
        "China": "Asia/Shanghai",
        "Australia": "Australia/Sydney",
        "South Africa": "Africa/Johannesburg",
    }
)

# Standard-time abbreviations, used only when zoneinfo cannot name the zone.
FALLBACK_ABBREVIATIONS: MappingProxyType[str, str] = MappingProxyType(
    {
        "Europe/London": "GMT",
        "Europe/Paris": "CET",
        "Europe/Berlin": "CET",
        "Europe/Madrid": "CET",
        "Europe/Rome": "CET",
        "Europe/Zagreb": "CET",
        "America/New_York": "EST",
        "America/Chicago": "CST",
        "America/Los_Angeles": "PST",
        "America/Toronto": "EST",
        "Asia/Tokyo": "JST",
        "Asia/Shanghai": "CST",
        "Asia/Seoul": "KST",
        "Asia/Singapore": "SGT",
        "Australia/Sydney": "AEST",
        "Australia/Melbourne": "AEST",
        "Pacific/Auckland": "NZST",
        "UTC": "UTC",
    }
)

ZONE_CITIES: MappingProxyType[str, str] = MappingProxyType(
    {
        "Europe/London": "London",
        "Europe/Paris": "Paris",
        "Europe/Berlin": "Berlin",
        "Europe/Madrid": "Madrid",
        "Europe/Rome": "Rome",
        "Europe/Zagreb": "Zagreb",
        "Europe/Amsterdam": "Amsterdam",
        "Europe/Brussels": "Brussels",
        "Europe/Lisbon": "Lisbon",
        "Europe/Istanbul": "Istanbul",
        "America/New_York": "New York",
        "America/Chicago": "Chicago",
        "America/Los_Angeles": "Los Angeles",
        "America/Toronto": "Toronto",
        "America/Mexico_City": "Mexico City",
        "America/Sao_Paulo": "São Paulo",
        "America/Argentina/Buenos_Aires": "Buenos Aires",
        "Asia/Tokyo": "Tokyo",
        "Asia/Shanghai": "Shanghai",
        "Asia/Seoul": "Seoul",
        "Asia/Singapore": "Singapore",
        "Asia/Dubai": "Dubai",
        "Asia/Kolkata": "Mumbai",
        "Australia/Sydney": "Sydney",
        "Australia/Melbourne": "Melbourne",
        "Pacific/Auckland": "Auckland",
        "Africa/Johannesburg": "Johannesburg",
        "UTC": "UTC",
    }
)

# Dense football cities; a region centered inside one is treated as urban.
URBAN_CENTERS: tuple[UrbanCenter, ...] = (
    UrbanCenter("London", 51.5074, -0.1278, 0.5),
    UrbanCenter("New York", 40.7128, -74.0060, 0.5),
    UrbanCenter("Los Angeles", 34.0522, -118.2437, 0.8),
    UrbanCenter("Paris", 48.8566, 2.3522, 0.4),
    UrbanCenter("Berlin", 52.5200, 13.4050, 0.4),
    UrbanCenter("Madrid", 40.4168, -3.7038, 0.4),
    UrbanCenter("Barcelona", 41.3851, 2.1734, 0.3),
    UrbanCenter("Milan", 45.4642, 9.1900, 0.3),
    UrbanCenter("Rome", 41.9028, 12.4964, 0.4),
    UrbanCenter("Amsterdam", 52.3676, 4.9041, 0.3),
)

# Boxes whose lat+lng span is below this are tight clusters, hence urban.
TIGHT_CLUSTER_SPAN = 0.1

# Upper bounds (exclusive) on latitude span for each zoom category.
ZOOM_CATEGORIES: tuple[tuple[float, str], ...] = (
    (0.05, "city block"),
    (0.2, "neighborhood"),
    (1.0, "city"),
    (3.0, "region"),
)
WIDEST_ZOOM_CATEGORY = "country"
