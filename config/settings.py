import os
from typing import Dict, Any, List, Optional
from pydantic import BaseModel
from dotenv import load_dotenv

from modelgen.errors import ConfigurationError

load_dotenv()

class Settings(BaseModel):
    """Application settings from environment variables"""
    
    # Source database (the schema to generate models from)
    DB_HOST: Optional[str] = os.getenv("DB_HOST")
    DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
    DB_DATABASE: Optional[str] = os.getenv("DB_DATABASE")
    DB_USER: Optional[str] = os.getenv("DB_USER")
    DB_PASSWORD: Optional[str] = os.getenv("DB_PASSWORD")
    DB_SCHEMA: str = os.getenv("DB_SCHEMA", "public")
    
    # Eloquent connection name written into generated models
    DB_CONNECTION: str = os.getenv("DB_CONNECTION", "pgsql")
    
    # Generated code
    MODEL_NAMESPACE: str = os.getenv("MODEL_NAMESPACE", "App\\Models\\Generated")
    TRAIT_NAMESPACE: str = os.getenv("TRAIT_NAMESPACE", "App\\Models\\Generated\\Relations")
    MODEL_PATH: str = os.getenv("MODEL_PATH", "app/Models/Generated")
    TRAIT_PATH: str = os.getenv("TRAIT_PATH", "app/Models/Generated/Relations")
    MODEL_EXTENDS: str = os.getenv("MODEL_EXTENDS", "Illuminate\\Database\\Eloquent\\Model")
    
    # Relationship naming: column_based, legacy or a dotted class path
    NAMING_STRATEGY: str = os.getenv("NAMING_STRATEGY", "column_based")
    
    # Comma separated; laravel's own migration table by default
    EXCLUDED_TABLES: str = os.getenv("EXCLUDED_TABLES", "migrations")
    
    @property
    def excluded_tables(self) -> List[str]:
        return [name.strip() for name in self.EXCLUDED_TABLES.split(",") if name.strip()]
    
    def connection_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for psycopg2.connect()"""
        return {
            "host": self.DB_HOST,
            "port": self.DB_PORT,
            "database": self.DB_DATABASE,
            "user": self.DB_USER,
            "password": self.DB_PASSWORD
        }
    
    def validate_database(self):
        """Fail fast when the source database is not configured"""
        missing = [
            name for name in ("DB_HOST", "DB_DATABASE", "DB_USER")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(f"Missing database settings: {', '.join(missing)}")
    
    class Config:
        env_file = ".env"
