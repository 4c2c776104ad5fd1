"""
Workflow Layer - Restoration Lifecycle

Defines the WorkflowController, the deterministic state machine that drives
a restoration session from upload to result.
"""

from img_restore.workflow.controller import WorkflowController

__all__ = [
    "WorkflowController",
]
