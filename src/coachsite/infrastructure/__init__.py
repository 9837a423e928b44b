"""Infrastructure adapters: persistence and media host."""
