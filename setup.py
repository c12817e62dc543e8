from setuptools import setup, find_packages

setup(
    name="issue-upvotes",
    version="1.0.0",
    description="Rank open GitHub issues by net +1/-1 reactions",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "rich>=13.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "issue-upvotes=issue_upvotes.cli:main",
        ],
    },
)
