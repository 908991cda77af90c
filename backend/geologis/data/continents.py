"""Continent table, keyed by the two-letter continent code used in COUNTRIES."""

CONTINENTS = [
    {"code": "AF", "name": "Africa", "altLangName": {"es": "África", "pt": "África", "fr": "Afrique"}},
    {"code": "AN", "name": "Antarctica", "altLangName": {"es": "Antártida", "pt": "Antártida", "fr": "Antarctique"}},
    {"code": "AS", "name": "Asia", "altLangName": {"es": "Asia", "pt": "Ásia", "fr": "Asie"}},
    {"code": "EU", "name": "Europe", "altLangName": {"es": "Europa", "pt": "Europa", "fr": "Europe"}},
    {"code": "NA", "name": "North America", "altLangName": {"es": "América del Norte", "pt": "América do Norte", "fr": "Amérique du Nord"}},
    {"code": "OC", "name": "Oceania", "altLangName": {"es": "Oceanía", "pt": "Oceania", "fr": "Océanie"}},
    {"code": "SA", "name": "South America", "altLangName": {"es": "América del Sur", "pt": "América do Sul", "fr": "Amérique du Sud"}},
]
