from pathlib import Path

from setuptools import find_packages, setup


def load_requirements() -> list[str]:
    req_path = Path(__file__).parent / "requirements.txt"
    lines = req_path.read_text(encoding="utf-8").splitlines()
    return [
        line.strip()
        for line in lines
        if line.strip() and not line.strip().startswith("#")
    ]


setup(
    name="sdcards",
    version="0.1.0",
    description="Generate Anki flashcards from SpanishDict lookups",
    packages=find_packages(include=["sdcards", "sdcards.*"]),
    python_requires=">=3.10",
    install_requires=load_requirements(),
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "sdcards=sdcards.__main__:main",
        ]
    },
)
