import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="element_feed",
    version="1.0.0",
    description="Publish an element of the day and an element of the hour from the PubChem periodic table",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Topic :: Utilities",
        "Intended Audience :: Developers",
    ],
    keywords="periodic table elements pubchem json feed element of the day",
    license="MIT",
    packages=find_packages(),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "tzdata",
        ],
    },
    entry_points={
        "console_scripts": [
            "element_feed=element_feed.element_feed:element_feed",
        ],
    },
    include_package_data=True,
    package_data={
        "element_feed": ["templates/*.jinja2", "validation_messages.json"],
    },
    zip_safe=False,
)
