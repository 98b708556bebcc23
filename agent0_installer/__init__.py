"""Agent Zero installer.

Provisions Agent Zero either as a Docker container or natively into a
Python virtual environment. Every step checks current host state before it
acts, so re-running converges to the same end state.
"""

__all__ = []
