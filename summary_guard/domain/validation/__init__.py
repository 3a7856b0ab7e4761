"""Summary validation domain: entities and pure check services."""
