"""Prompt builders. Every function here is pure: data in, prompt text out."""

from gojira.prompts.code import build_explain_prompt, build_test_prompt
from gojira.prompts.commit import build_commit_prompt
from gojira.prompts.jira import build_issue_prompt, build_checklist_prompt, ISSUE_TEMPLATES
from gojira.prompts.pr import build_pr_title_prompt, build_pr_description_prompt, PR_TITLE_MAX_LENGTH
from gojira.prompts.project import build_readme_prompt, build_analysis_prompt
from gojira.prompts.standup import Activities, build_standup_prompt
from gojira.prompts.summary import build_summary_prompt

__all__ = [
    "build_commit_prompt",
    "build_issue_prompt",
    "build_checklist_prompt",
    "ISSUE_TEMPLATES",
    "build_pr_title_prompt",
    "build_pr_description_prompt",
    "PR_TITLE_MAX_LENGTH",
    "Activities",
    "build_standup_prompt",
    "build_summary_prompt",
    "build_explain_prompt",
    "build_test_prompt",
    "build_readme_prompt",
    "build_analysis_prompt",
]
