from setuptools import find_packages, setup

setup(
    name="gitlab-link",
    version="0.1.0",
    description="mdBook preprocessor that turns GitLab issue, merge request and project references into links",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2",  # Config and output schemas
        "typer<0.26",  # CLI (0.26+ vendors its own click; the CLI reads the context via click)
        "click>=8.2",  # Typer runtime, separate stderr in CliRunner results
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
        "pygments",  # Output highlighting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "gitlab-link=gitlab_link.cli:main",
        ],
    },
)
