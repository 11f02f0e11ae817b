"""Pull request title and description prompts."""

PR_TITLE_MAX_LENGTH = 72


def build_pr_title_prompt(pr_type: str, ticket_id: str, commits: str) -> str:
    ticket_rule = (
        f"Include the ticket ID {ticket_id} in square brackets."
        if ticket_id else
        "There is no ticket ID."
    )
    return (
        "Based on the following commits, write a concise, descriptive Pull Request title. "
        f"The title must start with the type '{pr_type}' followed by a colon. {ticket_rule} "
        f"The title must be at most {PR_TITLE_MAX_LENGTH} characters. "
        "Reply with the title only.\n\n"
        f"Commits:\n{commits}"
    )


def build_pr_description_prompt(diff_stat: str, commits: str) -> str:
    return f"""Write a detailed Pull Request description based on the following changes. It must include:
1. A summary of what this PR implements or fixes
2. Context on why these changes are needed
3. Any important technical decisions
4. How to test the changes
5. A checklist of what was implemented

File changes:
{diff_stat}

Included commits:
{commits}

Format the answer in Markdown, with a heading (##) for each section."""
