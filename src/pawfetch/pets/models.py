"""Backend wire models for pet payloads.

These mirror what the endpoints and files send, identifiers included.
Nothing outside ``pawfetch.pets`` presentation code should need them.
"""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict

from pawfetch.common import NonEmptyString


class PetRecord(Protocol):
    @property
    def breed(self) -> str: ...


class Size(BaseModel):
    model_config = ConfigDict(extra="ignore")

    height_in_centimeters: int
    weight_in_kilograms: int
    description: str


class Cat(BaseModel):
    model_config = ConfigDict(extra="ignore")

    identifier: NonEmptyString
    breed: str
    size: Size


class Dog(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    breed: str


class Bird(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: NonEmptyString
    breed: str
    size: str
    can_fly: bool


__all__ = ["Bird", "Cat", "Dog", "PetRecord", "Size"]
