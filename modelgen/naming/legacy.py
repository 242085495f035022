from ..schema.models import ForeignKey
from .base import NamingStrategy


class LegacyNamingStrategy(NamingStrategy):
    """
        Names accessors after the target model only: ``user``, ``posts``.
        
        Two foreign keys to the same table end up with the same base name; the
        registry suffixes the later ones (``user2``).
    """
    
    name = "legacy"
    
    def has_one_function_name(self, foreign_key: ForeignKey) -> str:
        model = self.model_name_from_table(foreign_key.table_name)
        return self.singular_function_name(model)
    
    def has_many_function_name(self, foreign_key: ForeignKey) -> str:
        model = self.model_name_from_table(foreign_key.table_name)
        return self.plural_function_name(model)
    
    def belongs_to_function_name(self, foreign_key: ForeignKey) -> str:
        model = self.model_name_from_table(foreign_key.referenced_table)
        return self.singular_function_name(model)
    
    def belongs_to_many_function_name(self, owner_foreign_key: ForeignKey, related_foreign_key: ForeignKey) -> str:
        model = self.model_name_from_table(related_foreign_key.referenced_table)
        return self.plural_function_name(model)
