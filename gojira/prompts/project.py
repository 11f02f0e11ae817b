"""Whole-project prompts: README and architecture analysis."""

WORKFLOWS_PREFIX = ".github/workflows/"


def build_readme_prompt(tree: str, files_detail: str) -> str:
    return f"""Analyze the following sample of the project's file and directory structure:

{tree}

Then consider the list of files and their contents below. Describe the purpose of each file objectively, summarize the overall goal of the project and include installation and local run instructions. Organize everything as the content of a README.md file with the usual sections: **Description**, **Installation**, **Usage**, **Contributing** and **License**.

**Files:**

{files_detail}"""


def build_analysis_prompt(files: dict[str, str]) -> str:
    parts = [
        "You are an assistant specialized in source code analysis.\n"
        "Here are the files of a software project. Analyze in detail the structure, logic, "
        "logging, techniques in use and, if present, the CI/CD configuration."
    ]

    has_ci = False
    for path, content in files.items():
        parts.append(f"File: {path}\nCode:\n```\n{content}\n```")
        if path.startswith(WORKFLOWS_PREFIX):
            has_ci = True

    parts.append(
        "Based on the files above, write a document explaining:\n"
        "- The goal of the project\n"
        "- Main features and logic\n"
        "- Code structure and organization\n"
        "- Techniques in use (design patterns, frameworks, etc.)\n"
        "- A detailed explanation of the functions (helpers, services or handlers)\n"
        "- How logging works"
    )

    if has_ci:
        parts.append(
            "### CI/CD analysis\n"
            "The project contains CI/CD configuration. Describe how the pipeline is structured and identify:\n"
            "- Tools in use (GitHub Actions, CircleCI, etc.)\n"
            "- Pipeline steps (build, test, deploy)\n"
            "- Suggested improvements"
        )

    parts.append("Answer as technically and thoroughly as possible, for a developer new to the project.")
    return "\n\n".join(parts)
