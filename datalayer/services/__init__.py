"""
Services module for the data layer.

This module organizes services into:
- core: Provider clients and shared infrastructure (HTTP, cache, breakers, odds, ESPN)
- resolution: Team name alias tables and the fuzzy name resolver
- adapters: One adapter per sport plus the adapter registry
- data_layer: The orchestrator that routes, caches and aggregates
- verification: Quality grading and provenance checks on top of the orchestrator
"""
