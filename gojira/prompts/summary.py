"""Change summary prompt."""

from gojira.git.diff_processor import DiffDigest


def build_summary_prompt(digest: DiffDigest) -> str:
    return f"""Write a detailed summary of the following changes in a Git repository. Group the changes by feature or component and describe:
1. The main features added or changed
2. Bug fixes
3. Refactorings and code improvements
4. Dependency or configuration changes

Changed files:
{digest.text}

Keep the summary clear and concise, highlighting the most important changes. Format the result as Markdown, with headings and lists for readability."""
