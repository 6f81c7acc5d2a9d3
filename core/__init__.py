from .exceptions import KeyAuditException, ConfigurationError, TraversalError, DefinitionFileError, ReportWriteError
from .validators import validate_root_path, validate_worker_count, validate_extensions

__all__ = [
    'KeyAuditException',
    'ConfigurationError',
    'TraversalError',
    'DefinitionFileError',
    'ReportWriteError',
    'validate_root_path',
    'validate_worker_count',
    'validate_extensions'
]
