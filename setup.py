from setuptools import setup, find_packages
import re

# Read version from __init__.py
with open("conlluedit/__init__.py", encoding="utf-8") as f:
    content = f.read()
    version_match = re.search(r"__version__\s*=\s*['\"]([^'\"]+)['\"]", content)
    if not version_match:
        raise RuntimeError("Unable to find version string in conlluedit/__init__.py")
    version = version_match.group(1)

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="conlluedit",
    version=version,
    description="A text model for reading, navigating and editing CoNLL-U files.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["conlluedit", "conlluedit.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Text Processing :: Linguistic",
    ],
    python_requires=">=3.8",
    install_requires=[
        "click>=8.0",
        "python-dotenv>=1.0.0",
        "pydantic-settings>=2.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "conlluedit=conlluedit.cli.main:cli",
        ],
    },
)
