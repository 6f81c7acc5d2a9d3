class KeyAuditException(Exception):
    """Base exception for the key audit"""
    pass

class ConfigurationError(KeyAuditException):
    """Invalid settings or command line values"""
    pass

class TraversalError(KeyAuditException):
    """The project tree could not be walked"""
    pass

class DefinitionFileError(KeyAuditException):
    """A translation definition file is unreadable or malformed"""
    pass

class ReportWriteError(KeyAuditException):
    """An output file could not be serialized or written"""
    pass
