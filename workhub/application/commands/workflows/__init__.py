"""Workflow commands."""

from .workflow_commands import (
    CreateWorkflowCommand,
    CreateWorkflowHandler,
    DeleteWorkflowCommand,
    DeleteWorkflowHandler,
    SetWorkflowActiveCommand,
    SetWorkflowActiveHandler,
    UpdateWorkflowCommand,
    UpdateWorkflowHandler,
)

__all__ = [
    "CreateWorkflowCommand",
    "CreateWorkflowHandler",
    "DeleteWorkflowCommand",
    "DeleteWorkflowHandler",
    "SetWorkflowActiveCommand",
    "SetWorkflowActiveHandler",
    "UpdateWorkflowCommand",
    "UpdateWorkflowHandler",
]
