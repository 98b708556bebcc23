from .step_10_check_prereqs import CheckPrereqsStep
from .step_20_install_host_deps import InstallHostDepsStep
from .step_30_sync_repo import SyncRepoStep
from .step_40_create_venv import CreateVenvStep
from .step_50_install_python_deps import InstallPythonDepsStep
from .step_60_install_browser import InstallBrowserStep
from .step_70_launch_ui import LaunchUIStep
from .step_90_done import NativeDoneStep

__all__ = [
    "CheckPrereqsStep",
    "InstallHostDepsStep",
    "SyncRepoStep",
    "CreateVenvStep",
    "InstallPythonDepsStep",
    "InstallBrowserStep",
    "LaunchUIStep",
    "NativeDoneStep",
]
