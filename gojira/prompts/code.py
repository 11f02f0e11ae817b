"""Prompts that work on a single source file: explanations and tests."""

EXPERIENCE_LEVELS = {
    "beginner": "beginner",
    "intermediate": "intermediate",
    "expert": "experienced",
}


def build_explain_prompt(code: str, language: str, level: str = "intermediate") -> str:
    experience = EXPERIENCE_LEVELS.get((level or "").lower(), "experienced")
    return f"""Explain the following {language} code to a developer at the {experience} level. Give a detailed analysis that covers:

1. An overview of what the code does
2. An explanation of each important section or function
3. Patterns or techniques in use
4. Possible improvements or optimizations
5. Potential problems or bugs

Code:
```{language}
{code}
```

Format the answer as Markdown, with headings and code blocks where appropriate."""


def build_test_prompt(
    source: str,
    language: str,
    framework: str,
    coverage: str = "high",
    existing_tests: str | None = None,
) -> str:
    prompt = f"""Analyze the following {language} code and generate automated tests with {framework}. Aim for {coverage} coverage, including normal behavior and edge cases. For each function or method write at least one positive and one negative test when it applies.

Source code:
```{language}
{source}
```

Generate complete, well-structured tests that are ready to run. Include the required imports and set up the test environment correctly. Follow the best practices of {language} and {framework}."""

    if existing_tests:
        prompt += f"""

The test file already exists with the content below. Merge the new tests into it, keep the existing tests, and return the whole file:
```{language}
{existing_tests}
```"""
    return prompt
