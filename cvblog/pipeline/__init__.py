"""Build pipeline."""

from .orchestrator import BuildOrchestrator, BuildStage

__all__ = ["BuildOrchestrator", "BuildStage"]
