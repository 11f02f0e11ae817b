"""
gojira

AI-assisted Git, Jira and pull-request helper for the command line.
"""

__version__ = "1.0.0"

# Issue types accepted by `gojira jira` and understood by the Jira client
TASK_TYPES = ("Epic", "Bug", "Task")

# Columns of the kanban board, in display order
KANBAN_STATUSES = ("To Do", "In Progress", "Review", "Done")
