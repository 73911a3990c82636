from __future__ import annotations


class Ea2RdfError(Exception):
    """Base class for every error the converter reports to the operator."""


class ConversionError(Ea2RdfError):
    pass


class DiagramNotFoundError(ConversionError):
    pass


class AmbiguousDiagramError(ConversionError):
    pass


class InvalidConfigurationError(Ea2RdfError):
    pass


class ModelReadError(Ea2RdfError):
    pass


class OutputWriteError(Ea2RdfError):
    pass
