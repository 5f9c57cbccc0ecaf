"""Product catalog backend: products, categories and a cart lookup on async SQLAlchemy."""
