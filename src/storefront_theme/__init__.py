"""Storefront theming package.

Colour contrast validation and repair for seller storefronts and generated
landing pages. See ``storefront_theme.design`` for the pure colour math and
``storefront_theme.services`` for the generation pipeline glue.
"""

__version__ = "0.1.0"
