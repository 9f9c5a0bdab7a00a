"""In-memory keyed entity registries with search, sort and forecast helpers."""
