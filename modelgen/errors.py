class ModelGenError(Exception):
    """Base class for every error raised by modelgen."""


class ConfigurationError(ModelGenError):
    """
        Raised at startup when settings are missing or invalid.
    """


class NamingStrategyError(ConfigurationError):
    """
        Raised when the selected naming strategy is unknown or does not
        implement the NamingStrategy interface.
    """


class UnknownTableError(ModelGenError, KeyError):
    """
        Raised when the relationship registry is asked about a table it was
        never initialized with. This points at a bug in the caller.
    """

    def __init__(self, table_name: str):
        self.table_name = table_name
        super().__init__(f"Unknown table: '{table_name}'")

    def __str__(self) -> str:
        return self.args[0]
