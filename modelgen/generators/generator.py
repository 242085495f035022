import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from config.settings import Settings
from ..naming import NamingStrategy
from ..relations.models import RelationshipRegistry
from .model_generator import ModelGenerator
from .trait_generator import TraitGenerator

logger = logging.getLogger(__name__)

class Generator:
    """
        Writes one model file per table and, for tables with relationships, one
        relationship trait file.
    """
    def __init__(
        self,
        settings: Settings,
        registry: RelationshipRegistry,
        naming_strategy: NamingStrategy,
        overwrite: bool = False
    ):
        self.settings = settings
        self.registry = registry
        self.naming_strategy = naming_strategy
        self.overwrite = overwrite
        
        self.model_folder = Path(settings.MODEL_PATH)
        self.trait_folder = Path(settings.TRAIT_PATH)
        
    def handle(self, table_name: str) -> Optional[Path]:
        """
            Generate the model (and trait) for one table.
            
            Returns the model path, or None when an existing model was kept.
        """
        relations = self.registry.get(table_name)
        model_name = self.naming_strategy.model_name_from_table(table_name)
        trait_name = f"Has{model_name}Relations"
        model_path = self.model_folder / f"{model_name}.php"
        
        if model_path.exists() and not self.overwrite:
            logger.warning(f"Model {model_path} already exists, skipping (use --overwrite)")
            return None
        
        trait_fqcn = None
        if relations.has_any():
            trait_fqcn = f"{self.settings.TRAIT_NAMESPACE}\\{trait_name}"
            trait_source = TraitGenerator(
                trait_name,
                self.settings.MODEL_NAMESPACE,
                self.settings.TRAIT_NAMESPACE,
                relations
            ).render()
            
            self.trait_folder.mkdir(parents=True, exist_ok=True)
            trait_path = self.trait_folder / f"{trait_name}.php"
            trait_path.write_text(trait_source, encoding="utf-8")
            logger.debug(f"Wrote {trait_path}")
            
        model_source = ModelGenerator(
            self.settings.DB_CONNECTION,
            table_name,
            model_name,
            self.settings.MODEL_NAMESPACE,
            self.settings.MODEL_EXTENDS
        ).render(trait_fqcn)
        
        self.model_folder.mkdir(parents=True, exist_ok=True)
        model_path.write_text(model_source, encoding="utf-8")
        logger.info(f"Generated {model_name} ({relations.count()} relationships)")
        return model_path
    
    def generate_all(self, tables: Optional[Iterable[str]] = None) -> Dict[str, List[str]]:
        """
            Generate every table (or the given subset). A failing table is
            logged and reported, the remaining tables are still generated.
        """
        tables = list(tables) if tables is not None else self.registry.tables()
        summary: Dict[str, List[str]] = {"generated": [], "skipped": [], "failed": []}
        
        for table_name in tables:
            try:
                path = self.handle(table_name)
            except Exception as e:
                logger.error(f"Failed to generate model for table '{table_name}': {e}", exc_info=True)
                summary["failed"].append(table_name)
                continue
            
            if path is None:
                summary["skipped"].append(table_name)
            else:
                summary["generated"].append(table_name)
                
        logger.info(
            f"Generation complete: {len(summary['generated'])} generated, "
            f"{len(summary['skipped'])} skipped, {len(summary['failed'])} failed"
        )
        return summary
