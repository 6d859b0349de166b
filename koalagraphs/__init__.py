"""Graph algorithms: graph file formats, traversals, induced path search, set cover, dominating sets and perfect graph recognition."""

__version__ = "0.1.0"