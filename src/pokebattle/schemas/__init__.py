from .pokemon import BattleRead, PokemonCreate, PokemonRead, TrainerUpdate

__all__ = [
    "BattleRead",
    "PokemonCreate",
    "PokemonRead",
    "TrainerUpdate",
]
