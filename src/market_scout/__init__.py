"""Market scout: category-driven opportunity retrieval, filtering and views."""

__version__ = "0.1.0"
