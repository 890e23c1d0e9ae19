"""Error taxonomy for the CSR generation pipeline.

Every failure in the pipeline is raised as one of these. The command line
catches CsrGenError, logs a single line and exits non-zero.
"""


class CsrGenError(Exception):
    """Base class for all pipeline failures."""


class ArgumentError(CsrGenError):
    """Missing or invalid user input (identifier, key size, config value)."""


class FilesystemError(CsrGenError):
    """Directory or file creation/write failed, including 'already exists'."""


class KeyGenerationError(CsrGenError):
    """RSA key could not be generated or failed its consistency check."""


class SigningError(CsrGenError):
    """The certificate request could not be built or signed."""


class TemplateError(CsrGenError):
    """Manifest template missing, malformed or failed to render."""


__all__ = [
    "CsrGenError",
    "ArgumentError",
    "FilesystemError",
    "KeyGenerationError",
    "SigningError",
    "TemplateError",
]
