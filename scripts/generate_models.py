import sys
import os
import argparse
import json
import logging
import psycopg2

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from config.settings import Settings
from modelgen.errors import ConfigurationError
from modelgen.naming import get_naming_strategy, NAMING_STRATEGIES
from modelgen.relations import RelationshipBuilder
from modelgen.schema.extractors import SchemaExtractor
from modelgen.generators import Generator

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Generate Eloquent models from an existing database schema')
    parser.add_argument('tables', nargs='?', default=None,
                        help='Comma separated tables to generate models for: users,posts,comments')
    parser.add_argument('--schema', default=None, help='Database schema to read (default: DB_SCHEMA or public)')
    parser.add_argument('--naming-strategy', default=None,
                        help=f"Accessor naming strategy: {', '.join(sorted(NAMING_STRATEGIES))} or a dotted class path")
    parser.add_argument('--model-path', default=None, help='Where model files are written')
    parser.add_argument('--trait-path', default=None, help='Where relationship trait files are written')
    parser.add_argument('--model-namespace', default=None, help='PHP namespace of the generated models')
    parser.add_argument('--trait-namespace', default=None, help='PHP namespace of the generated traits')
    parser.add_argument('--connection', default=None, help='Eloquent connection name written into the models')
    parser.add_argument('--overwrite', action='store_true', help='Overwrite existing models')
    parser.add_argument('--dry-run', action='store_true', help='Print inferred relationships instead of writing files')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args) -> Settings:
    overrides = {
        'DB_SCHEMA': args.schema,
        'NAMING_STRATEGY': args.naming_strategy,
        'MODEL_PATH': args.model_path,
        'TRAIT_PATH': args.trait_path,
        'MODEL_NAMESPACE': args.model_namespace,
        'TRAIT_NAMESPACE': args.trait_namespace,
        'DB_CONNECTION': args.connection,
    }
    return settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def select_tables(available, requested):
    """
        Resolve the comma separated table argument against the schema.
        Unknown names are reported and dropped.
    """
    if not requested:
        return list(available)
    
    selected = []
    for name in (t.strip() for t in requested.split(',')):
        if not name:
            continue
        if name not in available:
            logger.error(f"Specified table not found: {name}")
        elif name not in selected:
            selected.append(name)
    return selected


def main(argv=None):
    args = parse_args(argv)
    
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    # Load settings
    logger.info("Loading settings...")
    settings = apply_overrides(Settings(), args)
    
    # Resolve the naming strategy before touching the database
    try:
        naming_strategy = get_naming_strategy(settings.NAMING_STRATEGY)
        settings.validate_database()
    except ConfigurationError as e:
        logger.error(str(e))
        return 1
    
    # Connect to source database
    logger.info(f"Connecting to source database: {settings.DB_DATABASE}")
    try:
        source_conn = psycopg2.connect(**settings.connection_kwargs())
    except psycopg2.Error as e:
        logger.error(f"Could not connect to source database: {e}")
        return 1
    
    try:
        extractor = SchemaExtractor(source_conn, excluded_tables=settings.excluded_tables)
        schema = extractor.extract_schema(settings.DB_SCHEMA)
        
        tables = select_tables(schema.table_names(), args.tables)
        if not tables:
            logger.error("No tables to generate")
            return 1
        
        # Relationships are inferred over the whole schema; only the selected
        # tables are written.
        registry = RelationshipBuilder(naming_strategy).build(schema)
        
        if args.dry_run:
            all_relations = registry.to_dict()
            relations = {name: all_relations[name] for name in tables}
            print(json.dumps(relations, indent=2))
            return 0
        
        generator = Generator(settings, registry, naming_strategy, overwrite=args.overwrite)
        summary = generator.generate_all(tables)
        
        logger.info("=" * 60)
        logger.info(f"Generated: {len(summary['generated'])}, skipped: {len(summary['skipped'])}, failed: {len(summary['failed'])}")
        logger.info("=" * 60)
        return 1 if summary['failed'] else 0
    
    except psycopg2.Error as e:
        logger.error(f"Schema extraction failed: {e}", exc_info=True)
        return 1
    
    finally:
        source_conn.close()
        logger.info("Connection closed")


if __name__ == '__main__':
    sys.exit(main())
