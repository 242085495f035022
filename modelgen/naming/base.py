from abc import ABC, abstractmethod

from ..schema.models import ForeignKey
from .inflector import lcfirst, pluralize, singularize, studly


class NamingStrategy(ABC):
    """
        Turns table names into model names and relationship descriptors into
        accessor (method) names.
        
        Foreign keys are always seen from the table that declares them: for a
        hasOne / hasMany the relationship lives on ``fk.referenced_table`` and
        points at ``fk.table_name``.
    """
    
    name: str = ""
    
    def model_name_from_table(self, table_name: str) -> str:
        return studly(singularize(table_name))
    
    @abstractmethod
    def has_one_function_name(self, foreign_key: ForeignKey) -> str:
        ...
    
    @abstractmethod
    def has_many_function_name(self, foreign_key: ForeignKey) -> str:
        ...
    
    @abstractmethod
    def belongs_to_function_name(self, foreign_key: ForeignKey) -> str:
        ...
    
    @abstractmethod
    def belongs_to_many_function_name(self, owner_foreign_key: ForeignKey, related_foreign_key: ForeignKey) -> str:
        """
            Name of the accessor on ``owner_foreign_key.referenced_table`` that
            reaches ``related_foreign_key.referenced_table`` through the pivot.
        """
        ...
    
    @staticmethod
    def plural_function_name(model_name: str) -> str:
        return pluralize(lcfirst(model_name))
    
    @staticmethod
    def singular_function_name(model_name: str) -> str:
        return singularize(lcfirst(model_name))
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
