"""HTTP layer for Pokebattle."""
