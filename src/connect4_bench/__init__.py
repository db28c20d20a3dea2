"""Tables and charts for search benchmark CSVs (see connect4_engine.scripts.benchmark)."""
