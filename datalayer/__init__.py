"""
Sports data normalization and verification layer.

Ingests teams, matches, statistics, head-to-head history, injuries and odds
from several upstream providers and exposes them through one normalized,
provider-agnostic model.

Usage:
    from datalayer.services.data_layer import build_data_layer

    data_layer = build_data_layer()
    result = await data_layer.get_enriched_match_data("nba", "Lakers", "Celtics")
"""
__version__ = "1.0.0"
