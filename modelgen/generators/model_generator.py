from typing import List, Optional


class ModelGenerator:
    """
        Renders the PHP source of one Eloquent model class.
    """
    def __init__(
        self,
        connection: str,
        table_name: str,
        model_name: str,
        model_namespace: str,
        extends: str = "Illuminate\\Database\\Eloquent\\Model"
    ):
        self.connection = connection
        self.table_name = table_name
        self.model_name = model_name
        self.model_namespace = model_namespace
        self.extends = extends
        
    def render(self, trait_fqcn: Optional[str] = None) -> str:
        """
            Build the model file. When ``trait_fqcn`` is given the model uses the
            generated relationship trait.
        """
        uses: List[str] = [self.extends]
        if trait_fqcn:
            uses.append(trait_fqcn)
        
        lines = [
            "<?php",
            "",
            f"namespace {self.model_namespace};",
            "",
        ]
        lines.extend(f"use {fqcn};" for fqcn in sorted(set(uses)))
        lines.extend([
            "",
            "/**",
            " * Generated",
            " */",
            f"class {self.model_name} extends {_short_name(self.extends)}",
            "{",
        ])
        if trait_fqcn:
            lines.extend([f"    use {_short_name(trait_fqcn)};", ""])
        lines.extend([
            f"    protected $connection = '{_escape(self.connection)}';",
            "",
            f"    protected $table = '{_escape(self.table_name)}';",
            "",
            "    protected $guarded = [];",
            "}",
            "",
        ])
        return "\n".join(lines)


def _short_name(fqcn: str) -> str:
    return fqcn.rsplit("\\", 1)[-1]


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")
