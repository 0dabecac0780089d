from pydantic import BaseModel, ConfigDict, Field

from pokebattle.domain.enums import Species


class PokemonCreate(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    species: Species = Field(..., description="Species of the new Pokemon")
    trainer: str = Field(..., min_length=1, max_length=255, description="Owning trainer")


class TrainerUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    trainer: str = Field(..., min_length=1, max_length=255, description="New trainer name")


class PokemonRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Primary key")
    species: Species = Field(..., description="Species of the Pokemon")
    trainer: str = Field(..., description="Owning trainer")
    level: int = Field(..., ge=0, description="Battle strength")


class BattleRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    winner: PokemonRead = Field(..., description="Winner with its level raised by one")
    loser: PokemonRead = Field(
        ..., description="Loser with its level lowered by one; level 0 means it was removed"
    )
