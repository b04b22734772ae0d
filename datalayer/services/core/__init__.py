"""
Core services shared by every sport.

- provider_client: Authenticated API-Sports request wrapper (never raises)
- ttl_cache: Async time-boxed key/value cache
- circuit_breaker: pybreaker breakers for each upstream
- odds_api_service: The Odds API client
- espn_service: ESPN injuries feed
"""
