from import_boundaries.core.constants import MessageId as MessageId
from import_boundaries.core.exceptions import (
    ConfigurationError as ConfigurationError,
    ImportBoundariesError as ImportBoundariesError,
    ResolutionError as ResolutionError,
)
from import_boundaries.core.types import (
    Boundary as Boundary,
    BoundaryConfig as BoundaryConfig,
    CrossBoundaryStyle as CrossBoundaryStyle,
    Relationship as Relationship,
    ResolvedImport as ResolvedImport,
    Violation as Violation,
    ViolationData as ViolationData,
)
