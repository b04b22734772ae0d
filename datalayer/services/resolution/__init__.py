"""Team name resolution: alias tables, normalization and fuzzy matching."""
from datalayer.services.resolution.team_resolver import TeamNameResolver, resolver_key

__all__ = ["TeamNameResolver", "resolver_key"]
