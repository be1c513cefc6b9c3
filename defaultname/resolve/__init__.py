"""Export resolution: contracts, resolvers and resolution-error reporting."""

from defaultname.resolve.exports import (
    ExportInfo,
    ExportResolver,
    MappingExportResolver,
    NullExportResolver,
    ResolutionError,
)
from defaultname.resolve.report import report_resolution_errors
from defaultname.resolve.source import MODULE_EXTENSIONS, SourceExportResolver

__all__ = [
    "MODULE_EXTENSIONS",
    "ExportInfo",
    "ExportResolver",
    "MappingExportResolver",
    "NullExportResolver",
    "ResolutionError",
    "SourceExportResolver",
    "report_resolution_errors",
]
