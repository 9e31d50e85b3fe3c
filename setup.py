from setuptools import find_packages, setup

setup(
    name="doclinks",
    version="0.1.0",
    description="Documentation link validator, auto-fixer and site link rewriter",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schemas
        "typer>=0.15.4,<0.26",  # CLI; 0.26+ vendors its own click, breaking click exception handling
        "click",  # Typer's command layer
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output
        "pygments",  # Output highlighting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "doclinks=doclinks.cli:main",
        ],
    },
)
