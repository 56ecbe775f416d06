"""Knowledge Galaxy: validated knowledge graph ingestion."""

__version__ = "1.0.0"
