# setup.py
from setuptools import setup

setup(
    name="schemelet",
    version="0.1.0",
    description="A small Scheme interpreter with a REPL",
    packages=[
        "schemelet",
        "schemelet.types",
        "schemelet.reader",
        "schemelet.evaluation",
        "schemelet.evaluation.special_forms",
        "schemelet.builtin",
    ],
    python_requires=">=3.10",
    install_requires=["pyparsing>=3.1"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["schemelet = schemelet.cli:main"]},
    zip_safe=False,
)
