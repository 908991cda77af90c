"""
Geologis Backend — Static Dataset Tables
==========================================

What:  The country and continent tables, frozen once at import time.
How:   Every record becomes a MappingProxyType (nested mappings too) inside a
       tuple, so nothing that imports the tables can mutate them. Only the
       DatasetService reads these; callers get copies from it.
"""

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Tuple

from geologis.data.continents import CONTINENTS
from geologis.data.countries import COUNTRIES


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    return value


def _freeze_table(records: Iterable[dict]) -> Tuple[Mapping[str, Any], ...]:
    return tuple(_freeze(record) for record in records)


COUNTRY_TABLE = _freeze_table(COUNTRIES)
CONTINENT_TABLE = _freeze_table(CONTINENTS)
