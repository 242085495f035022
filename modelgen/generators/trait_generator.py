from typing import List, Set

from ..relations.models import Relationship, RelationshipKind, TableRelationships
from .model_generator import _escape, _short_name

HAS_RELATIONSHIPS = "Illuminate\\Database\\Eloquent\\Concerns\\HasRelationships"


class TraitGenerator:
    """
        Renders the ``Has{Model}Relations`` trait holding one accessor method
        per inferred relationship, in the order belongsTo, hasOne, hasMany,
        belongsToMany.
    """
    def __init__(
        self,
        trait_name: str,
        model_namespace: str,
        trait_namespace: str,
        relations: TableRelationships
    ):
        self.trait_name = trait_name
        self.model_namespace = model_namespace
        self.trait_namespace = trait_namespace
        self.relations = relations
        
    def render(self) -> str:
        uses: Set[str] = {HAS_RELATIONSHIPS}
        methods: List[str] = []
        
        for relationship in self.relations.all():
            uses.add(f"{self.model_namespace}\\{relationship.target_model}")
            methods.append(self._render_method(relationship))
            
        lines = [
            "<?php",
            "",
            f"namespace {self.trait_namespace};",
            "",
        ]
        lines.extend(f"use {fqcn};" for fqcn in sorted(uses))
        lines.extend([
            "",
            "/**",
            " * Generated",
            " */",
            f"trait {self.trait_name}",
            "{",
            f"    use {_short_name(HAS_RELATIONSHIPS)};",
        ])
        for method in methods:
            lines.append("")
            lines.append(method)
        lines.extend(["}", ""])
        return "\n".join(lines)
    
    @staticmethod
    def _render_method(relationship: Relationship) -> str:
        if relationship.kind == RelationshipKind.BELONGS_TO_MANY:
            arguments = [
                relationship.pivot_table,
                relationship.owner_pivot_column,
                relationship.related_pivot_column,
            ]
        elif relationship.kind == RelationshipKind.BELONGS_TO:
            arguments = [relationship.local_column, relationship.target_column]
        else:
            arguments = [relationship.foreign_column, relationship.local_column]
            
        quoted = ", ".join(f"'{_escape(argument)}'" for argument in arguments)
        body = f"return $this->{relationship.kind.value}({relationship.target_model}::class, {quoted});"
        
        return "\n".join([
            f"    public function {relationship.accessor_name}()",
            "    {",
            f"        {body}",
            "    }",
        ])
