"""A third-person block-terrain walk with frustum culling and a circling sun."""

__version__ = "0.1.0"