"""Setup script for catalog-graph"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
this_directory = Path(__file__).parent
long_description = ""
readme_path = this_directory / "README.md"
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")

setup(
    name="catalog-graph",
    version="0.1.0",
    description="GraphQL catalog/order demo service backed by a document store",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"catalog_graph.server": ["templates/*.html"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Framework :: AsyncIO",
        "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.11",
    install_requires=[
        "strawberry-graphql>=0.230.0",
        "starlette>=0.37.0",
        "uvicorn>=0.29.0",
        "typer>=0.12.0",
        "rich>=13.0.0",
        "Faker>=24.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "httpx>=0.27.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "catalog-graph=catalog_graph.cli:app",
        ],
    },
    keywords="graphql strawberry starlette catalog demo",
)
