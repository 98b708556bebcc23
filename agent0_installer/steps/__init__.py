from .docker import (
    DockerDoneStep,
    EnsureEngineStep,
    PullImageStep,
    ReconcileContainerStep,
    RunContainerStep,
)
from .native import (
    CheckPrereqsStep,
    CreateVenvStep,
    InstallBrowserStep,
    InstallHostDepsStep,
    InstallPythonDepsStep,
    LaunchUIStep,
    NativeDoneStep,
    SyncRepoStep,
)


def build_docker_steps():
    return [
        EnsureEngineStep(),
        PullImageStep(),
        ReconcileContainerStep(),
        RunContainerStep(),
        DockerDoneStep(),
    ]


def build_native_steps():
    return [
        CheckPrereqsStep(),
        InstallHostDepsStep(),
        SyncRepoStep(),
        CreateVenvStep(),
        InstallPythonDepsStep(),
        InstallBrowserStep(),
        LaunchUIStep(),
        NativeDoneStep(),
    ]


PROCEDURES = {
    "docker": build_docker_steps,
    "native": build_native_steps,
}


def build_steps(mode: str):
    try:
        builder = PROCEDURES[mode]
    except KeyError:
        raise ValueError(f"Invalid --mode '{mode}' (must be docker or native)") from None
    return builder()


__all__ = [
    "PROCEDURES",
    "build_steps",
    "build_docker_steps",
    "build_native_steps",
]
