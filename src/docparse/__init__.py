"""docparse — parser configuration for the documentation generator."""

__all__ = [
    "__version__",
    "ParserConfiguration",
    "ConfigurationError",
    "default_configuration",
    "load",
    "dump",
]
__version__ = "0.1.0"

from docparse.api import default_configuration, dump, load  # noqa: E402, F401
from docparse.errors import ConfigurationError  # noqa: E402, F401
from docparse.model.configuration import ParserConfiguration  # noqa: E402, F401
