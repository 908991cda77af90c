# Routes package init
"""
Geologis Backend — API Routes Package
=======================================

Route Inventory:
    - index.py:       GET /v1/
    - countries.py:   GET /v1/countries
                      GET /v1/countries/{code}
                      GET /v1/countries/name/{name}
    - continents.py:  GET /v1/continents
                      GET /v1/continents/{code}
                      GET /v1/continents/{code}/countries
    - cities.py:      GET /v1/cities/name/{name}
                      GET /v1/cities/country/{countryCode}/name/{name}
    - health.py:      GET /health

Routes are thin: they read path/query values, call a service, and return
its result. Errors are raised as GeologisError subclasses and rendered by
the handlers registered in main.py.
"""
