"""Hospital patient and medicine tracking backed by SQLite."""

__version__ = "0.1.0"
__all__ = ["models", "data_access", "table_models", "controllers"]