"""Application interfaces (ports): service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from devportal.infrastructure.
"""

from devportal.application.interfaces.services import (
    IDrnSource,
    IWorkspaceNameService,
)

__all__ = ["IDrnSource", "IWorkspaceNameService"]
