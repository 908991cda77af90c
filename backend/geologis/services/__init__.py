# Services package init
"""
Geologis Backend — Services Layer
===================================

Service Inventory:
    - DatasetService: Lookups over the frozen country/continent tables
    - pagination / ordering: Page slicing and code ordering helpers
    - CityLookupProvider (abstract): Interface for city search upstreams
    - MaerskLocationsService: Concrete provider using the Maersk locations API
    - city_normalizer: Concatenated-JSON parsing and City shaping
    - CountryService, ContinentService, CityService: Per-resource orchestration
"""
