from .model_generator import ModelGenerator
from .trait_generator import TraitGenerator
from .generator import Generator

__all__ = ["ModelGenerator", "TraitGenerator", "Generator"]
