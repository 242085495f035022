from typing import Optional, Set

from ..schema.models import ForeignKey
from .inflector import camel, past_participle, pluralize, singularize, studly
from .legacy import LegacyNamingStrategy

ID_SUFFIX = "_id"


class ColumnBasedNamingStrategy(LegacyNamingStrategy):
    """
        Derives accessor names from foreign key column and pivot table names,
        falling back to legacy naming when there is nothing to go on.
        
        - belongsTo:      posts.author_id          -> author
        - hasMany:        posts.author_id on users -> authoredPosts
        - belongsToMany:  users <- comments -> posts on users -> commentedPosts
        - hasOne:         always legacy
    """
    
    name = "column_based"
    
    def belongs_to_function_name(self, foreign_key: ForeignKey) -> str:
        stem = self._strip_id_suffix(foreign_key.local_column)
        if stem:
            return camel(stem)
        
        return super().belongs_to_function_name(foreign_key)
    
    def has_many_function_name(self, foreign_key: ForeignKey) -> str:
        stem = self._strip_id_suffix(foreign_key.local_column)
        parent_singular = singularize(foreign_key.referenced_table)
        
        # users.id <- posts.user_id: "posts" already says it all
        if not stem or stem == parent_singular:
            return super().has_many_function_name(foreign_key)
        
        model = self.model_name_from_table(foreign_key.table_name)
        return camel(past_participle(stem)) + studly(pluralize(model))
    
    def belongs_to_many_function_name(self, owner_foreign_key: ForeignKey, related_foreign_key: ForeignKey) -> str:
        pivot_table = owner_foreign_key.table_name
        owner_table = owner_foreign_key.referenced_table
        related_table = related_foreign_key.referenced_table
        
        if self.is_standard_pivot_name(pivot_table, owner_table, related_table):
            return super().belongs_to_many_function_name(owner_foreign_key, related_foreign_key)
        
        model = self.model_name_from_table(related_table)
        prefix = past_participle(singularize(pivot_table))
        return camel(prefix) + studly(pluralize(model))
    
    @classmethod
    def is_standard_pivot_name(cls, pivot_table: str, first_table: str, second_table: str) -> bool:
        """
            True when the pivot is named after the two tables it joins, in
            either order, singular or plural: role_user, user_roles, roleuser.
        """
        first_forms = cls._name_forms(first_table)
        second_forms = cls._name_forms(second_table)
        
        for first in first_forms:
            for second in second_forms:
                for separator in ("_", ""):
                    if pivot_table in (f"{first}{separator}{second}", f"{second}{separator}{first}"):
                        return True
        return False
    
    @staticmethod
    def _name_forms(table_name: str) -> Set[str]:
        singular = singularize(table_name)
        return {table_name, singular, pluralize(singular)}
    
    @staticmethod
    def _strip_id_suffix(column_name: str) -> Optional[str]:
        if column_name.endswith(ID_SUFFIX):
            stem = column_name[:-len(ID_SUFFIX)]
            return stem or None
        return None
