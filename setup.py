from setuptools import setup, find_packages

long_description = """
A minimal directed, unweighted graph with string-named vertices.

Vertices and edges are added idempotently, edges create their endpoints on the
fly, and neighbors are always listed in name order. Graphs can be read from
DOT files and drawn with graphviz.
"""

setup(name="namedgraph",
        version="0.0.1",
        description="Minimal directed graph keyed by vertex names",
        long_description=long_description,
        license="MIT",
        packages=find_packages(include=["namedgraph", "namedgraph.*"]),
        python_requires=">=3.8",
        install_requires=[
            "graphviz",
            "pydot"],
        zip_safe=False)
