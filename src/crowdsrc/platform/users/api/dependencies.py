"""User API dependencies.

``get_crowdsrc_service`` is a placeholder. The application overrides it
(``app.dependency_overrides``) with the service it wired up.
"""

from fastapi import Request

from ..core.protocols import CrowdSrcService


def get_crowdsrc_service() -> CrowdSrcService:
    """Placeholder for the CrowdSrcService dependency.
    
    Applications must override this to provide a configured service.
    """
    raise NotImplementedError(
        "Applications must provide their own crowdsrc service dependency"
    )


def get_service_from_state(request: Request) -> CrowdSrcService:
    """Override for ``get_crowdsrc_service`` reading ``app.state.crowdsrc_service``."""
    service = getattr(request.app.state, "crowdsrc_service", None)
    if service is None:
        raise RuntimeError("crowdsrc service is not initialized")
    return service
