from .step_10_ensure_engine import EnsureEngineStep
from .step_20_pull_image import PullImageStep
from .step_30_reconcile_container import ReconcileContainerStep
from .step_40_run_container import RunContainerStep
from .step_90_done import DockerDoneStep

__all__ = [
    "EnsureEngineStep",
    "PullImageStep",
    "ReconcileContainerStep",
    "RunContainerStep",
    "DockerDoneStep",
]
