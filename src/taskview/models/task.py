"""
Task metadata consumed by the view composer.

The storage layer owns loading and saving tasks; TaskCard only carries the
fields a renderer needs, already parsed from the task file's frontmatter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class TaskCard:
    """Frontmatter fields of a single task file."""

    id: str
    title: str
    status: str = "To Do"
    created_date: str = ""
    updated_date: Optional[str] = None
    assignee: List[str] = field(default_factory=list)
    reporter: Optional[str] = None
    labels: List[str] = field(default_factory=list)
    milestone: Optional[str] = None
    parent_task_id: Optional[str] = None
    subtasks: List[str] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    description: str = ""
    acceptance_criteria: List[str] = field(default_factory=list)

    @property
    def header(self) -> str:
        """'Task <id> - <title>' as shown at the top of every view."""
        return f"Task {self.id} - {self.title}"
